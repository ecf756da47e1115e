"""Raster decoding and canonical resampling."""

import logging
from typing import Union

import cv2
import numpy as np

from models.encoded_image import EncodedImage, sniff_format
from models.errors import DecodeError, EmptyRasterError, UnsupportedFormatError
from models.raster import PixelGrid
from utils.constants import CANONICAL_SIZE

logger = logging.getLogger(__name__)

INTERPOLATION_MODES = {
    'nearest': cv2.INTER_NEAREST,
    'linear': cv2.INTER_LINEAR,
    'area': cv2.INTER_AREA,
    'cubic': cv2.INTER_CUBIC,
}

FIT_MODES = ('cover', 'fill')

__all__ = ['decode_image', 'sniff_format', 'INTERPOLATION_MODES', 'FIT_MODES']


def _crop_to_aspect(rgb: np.ndarray, target_width: int, target_height: int) -> np.ndarray:
    """Centre-crop to the target aspect ratio (cover semantics)."""
    src_h, src_w = rgb.shape[:2]
    if src_w * target_height > src_h * target_width:
        crop_w = max(1, int(round(src_h * target_width / target_height)))
        x0 = (src_w - crop_w) // 2
        return np.ascontiguousarray(rgb[:, x0:x0 + crop_w])
    if src_w * target_height < src_h * target_width:
        crop_h = max(1, int(round(src_w * target_height / target_width)))
        y0 = (src_h - crop_h) // 2
        return np.ascontiguousarray(rgb[y0:y0 + crop_h, :])
    return rgb


def _to_uint8(decoded: np.ndarray) -> np.ndarray:
    """Scale 16-bit or float samples down to 8 bit."""
    if decoded.dtype == np.uint8:
        return decoded
    if decoded.dtype == np.uint16:
        return np.round(decoded.astype(np.float64) / 257.0).astype(np.uint8)
    if np.issubdtype(decoded.dtype, np.floating):
        return np.round(np.clip(decoded, 0.0, 1.0) * 255.0).astype(np.uint8)
    raise DecodeError(f"Unsupported sample type: {decoded.dtype}")


def _to_rgb(decoded: np.ndarray) -> np.ndarray:
    """OpenCV channel layout (gray, BGR, BGRA) to RGB, alpha dropped."""
    if decoded.ndim == 2:
        return cv2.cvtColor(decoded, cv2.COLOR_GRAY2RGB)

    channels = decoded.shape[2]
    if channels in (1, 2):
        # gray, or gray + alpha
        return cv2.cvtColor(np.ascontiguousarray(decoded[:, :, 0]), cv2.COLOR_GRAY2RGB)
    if channels == 3:
        return cv2.cvtColor(decoded, cv2.COLOR_BGR2RGB)
    if channels == 4:
        return cv2.cvtColor(decoded, cv2.COLOR_BGRA2RGB)
    raise DecodeError(f"Unsupported channel count: {channels}")


def decode_image(
    image: Union[EncodedImage, bytes],
    target_width: int = CANONICAL_SIZE,
    target_height: int = CANONICAL_SIZE,
    interpolation: str = 'area',
    fit: str = 'cover'
) -> PixelGrid:
    """Decode raster bytes and resample to exactly target_width x target_height.

    With fit='cover' the source is centre-cropped to the target aspect
    ratio before scaling; fit='fill' stretches it.

    Vector placeholder markup is rejected with UnsupportedFormatError; it
    should have been filtered out by sniffing before reaching this point.
    """
    if not isinstance(image, EncodedImage):
        image = EncodedImage.from_bytes(bytes(image))

    if target_width < 1 or target_height < 1:
        raise EmptyRasterError(f"Target size must be positive, got {target_width}x{target_height}")
    if not image.is_raster:
        raise UnsupportedFormatError(f"'{sniff_format(image.data)}' content is not raster imagery")
    if not image.data:
        raise DecodeError("Image byte stream is empty")
    if interpolation not in INTERPOLATION_MODES:
        raise ValueError(f"Unknown interpolation: {interpolation}")
    if fit not in FIT_MODES:
        raise ValueError(f"Unknown fit: {fit}")

    buf = np.frombuffer(image.data, dtype=np.uint8)
    try:
        decoded = cv2.imdecode(buf, cv2.IMREAD_UNCHANGED)
    except cv2.error as e:
        raise DecodeError(f"Could not decode {image.format} image: {e}") from e

    if decoded is None or decoded.size == 0:
        raise DecodeError(f"Could not decode {image.format} image ({image.size} bytes)")

    rgb = _to_rgb(_to_uint8(decoded))
    src_h, src_w = rgb.shape[:2]

    if fit == 'cover':
        rgb = _crop_to_aspect(rgb, target_width, target_height)

    if rgb.shape[1] != target_width or rgb.shape[0] != target_height:
        rgb = cv2.resize(
            rgb, (target_width, target_height),
            interpolation=INTERPOLATION_MODES[interpolation]
        )

    logger.debug(f"Decoded {image.format} {src_w}x{src_h} -> {target_width}x{target_height}")
    return PixelGrid(pixels=np.ascontiguousarray(rgb))
