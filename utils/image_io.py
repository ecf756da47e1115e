"""Image I/O using OpenCV."""

from pathlib import Path
from typing import Union

import cv2
import numpy as np

from models.encoded_image import EncodedImage


def load_image_bytes(path: Union[str, Path]) -> EncodedImage:
    """Read an image file as-is, without decoding."""
    data = Path(path).read_bytes()
    return EncodedImage.from_bytes(data)


def save_image_bytes(image: EncodedImage, path: Union[str, Path]) -> None:
    Path(path).write_bytes(image.data)


def encode_rgb(image: np.ndarray, ext: str = '.png') -> EncodedImage:
    """Encode an RGB uint8 array (e.g. a synthetic scene) to image bytes."""
    ok, buf = cv2.imencode(ext, cv2.cvtColor(image, cv2.COLOR_RGB2BGR))
    if not ok:
        raise ValueError(f"Could not encode image as {ext}")
    return EncodedImage.from_bytes(buf.tobytes())
