"""Image source interface and tagged fetch results.

Providers report "no imagery" explicitly with a PlaceholderImage instead
of handing back placeholder bytes as if they were a real scene. Untagged
byte streams from older providers are classified by sniffing.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Protocol, Tuple, Union
from xml.sax.saxutils import escape

from models.encoded_image import EncodedImage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RealImage:
    """Raster imagery delivered by a provider."""

    image: EncodedImage
    source: str = ''


@dataclass(frozen=True)
class PlaceholderImage:
    """Provider could not deliver imagery; image is display-only markup."""

    image: EncodedImage
    reason: str = 'Satellite imagery unavailable'


FetchResult = Union[RealImage, PlaceholderImage]


class ImageSourceProvider(Protocol):
    """Resolves a location id and date into encoded imagery."""

    def fetch(self, location_id: str, date: str) -> FetchResult:
        ...


def render_placeholder_svg(location_id: str, date: str, size: int = 1024) -> bytes:
    """Deterministic SVG shown when imagery is unavailable."""
    mid = size // 2
    svg = (
        f'<svg width="{size}" height="{size}" xmlns="http://www.w3.org/2000/svg">\n'
        f'  <rect width="{size}" height="{size}" fill="#1a5f4f"/>\n'
        f'  <text x="{mid}" y="{mid - 62}" font-family="Arial" font-size="32" fill="#10b981" '
        f'text-anchor="middle">{escape(location_id)}</text>\n'
        f'  <text x="{mid}" y="{mid - 12}" font-family="Arial" font-size="24" fill="#6ee7b7" '
        f'text-anchor="middle">Date: {escape(date)}</text>\n'
        f'  <text x="{mid}" y="{mid + 38}" font-family="Arial" font-size="18" fill="#d1fae5" '
        f'text-anchor="middle">Satellite imagery unavailable</text>\n'
        f'</svg>'
    )
    return svg.encode('utf-8')


def make_placeholder(location_id: str, date: str, reason: str = 'Satellite imagery unavailable') -> PlaceholderImage:
    data = render_placeholder_svg(location_id, date)
    return PlaceholderImage(image=EncodedImage(data=data, format='svg'), reason=reason)


def classify_source_bytes(data: bytes, source: str = '') -> FetchResult:
    """Tag an untagged byte stream as real or placeholder by sniffing it."""
    image = EncodedImage.from_bytes(data)
    if image.is_raster:
        return RealImage(image=image, source=source)
    return PlaceholderImage(image=image, reason='Source returned non-raster placeholder content')


class InMemoryImageSource:
    """Provider backed by a dict of (location_id, date) -> bytes.

    Missing entries fall back to a deterministic placeholder.
    """

    def __init__(self, images: Dict[Tuple[str, str], bytes] | None = None):
        self.images = dict(images or {})

    def add(self, location_id: str, date: str, data: bytes) -> None:
        self.images[(location_id, date)] = data

    def fetch(self, location_id: str, date: str) -> FetchResult:
        data = self.images.get((location_id, date))
        if data is None:
            logger.warning(f"No imagery for {location_id} on {date}, using placeholder")
            return make_placeholder(location_id, date)
        return classify_source_bytes(data, source=f"memory:{location_id}/{date}")
