"""Lossless PNG encoding of the change map."""

from typing import Optional, Union

import cv2
import numpy as np

from models.encoded_image import EncodedImage
from models.errors import EmptyRasterError, EncodeError
from utils.constants import PNG_COMPRESSION_LEVEL


def encode_visualization(
    raster: np.ndarray,
    width: Optional[int] = None,
    height: Optional[int] = None
) -> EncodedImage:
    """Encode a single-channel uint8 raster as PNG.

    A flat raster needs width and height; a 2D raster is used as-is.
    """
    if width is not None and height is not None:
        if raster.size != width * height:
            raise ValueError(f"Raster has {raster.size} samples, expected {width}x{height}")
        raster = raster.reshape(height, width)

    if raster.ndim != 2:
        raise ValueError(f"Visualization must be single-channel 2D, got shape {raster.shape}")
    if raster.dtype != np.uint8:
        raise ValueError(f"Visualization must be uint8, got {raster.dtype}")
    if raster.size == 0:
        raise EmptyRasterError("Cannot encode a zero-pixel visualization")

    try:
        ok, buf = cv2.imencode(
            '.png', np.ascontiguousarray(raster),
            [cv2.IMWRITE_PNG_COMPRESSION, PNG_COMPRESSION_LEVEL]
        )
    except cv2.error as e:
        raise EncodeError(f"PNG encoding failed: {e}") from e
    if not ok:
        raise EncodeError("PNG encoding failed")

    return EncodedImage(data=buf.tobytes(), format='png')


def decode_visualization(image: Union[EncodedImage, bytes]) -> np.ndarray:
    """Read an encoded change map back into a (H, W) uint8 array."""
    data = image.data if isinstance(image, EncodedImage) else bytes(image)
    raster = cv2.imdecode(np.frombuffer(data, dtype=np.uint8), cv2.IMREAD_UNCHANGED)
    if raster is None:
        raise ValueError("Could not decode visualization image")
    return raster
