"""Encoded image bytes with a sniffed format tag."""

from dataclasses import dataclass

_XML_PREFIXES = (b'<?xml', b'<svg', b'<!doctype svg')

_MAGIC = (
    (b'\x89PNG\r\n\x1a\n', 'png'),
    (b'\xff\xd8\xff', 'jpeg'),
    (b'GIF87a', 'gif'),
    (b'GIF89a', 'gif'),
    (b'BM', 'bmp'),
    (b'II*\x00', 'tiff'),
    (b'MM\x00*', 'tiff'),
)

RASTER_FORMATS = frozenset({'png', 'jpeg', 'gif', 'bmp', 'tiff', 'webp'})


def sniff_format(data: bytes) -> str:
    """Identify an image byte stream from its leading bytes."""
    head = data[:64].lstrip(b'\xef\xbb\xbf').lstrip()
    if head.lower().startswith(_XML_PREFIXES):
        return 'svg'
    for magic, name in _MAGIC:
        if data.startswith(magic):
            return name
    if data[:4] == b'RIFF' and data[8:12] == b'WEBP':
        return 'webp'
    return 'unknown'


@dataclass(frozen=True)
class EncodedImage:
    """Opaque image bytes plus format tag. Never mutated."""

    data: bytes
    format: str = 'unknown'

    @classmethod
    def from_bytes(cls, data: bytes) -> 'EncodedImage':
        return cls(data=bytes(data), format=sniff_format(data))

    @property
    def is_raster(self) -> bool:
        # untagged bytes are classified by content
        if self.format == 'unknown':
            return sniff_format(self.data) != 'svg'
        return self.format != 'svg'

    @property
    def size(self) -> int:
        return len(self.data)
