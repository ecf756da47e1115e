"""Pixel grid and index raster containers."""

from dataclasses import dataclass
import numpy as np


@dataclass
class PixelGrid:
    """Canonical RGB grid, shape (H, W, C), dtype uint8."""

    pixels: np.ndarray

    def __post_init__(self):
        if self.pixels.ndim != 3 or self.pixels.shape[2] < 3:
            raise ValueError(f"PixelGrid needs (H, W, C>=3) pixels, got shape {self.pixels.shape}")
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"PixelGrid pixels must be uint8, got {self.pixels.dtype}")

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def channels(self) -> int:
        return self.pixels.shape[2]

    @property
    def samples(self) -> np.ndarray:
        """Flat row-major, channel-interleaved samples (length W*H*C)."""
        return self.pixels.reshape(-1)

    @property
    def red(self) -> np.ndarray:
        return self.pixels[:, :, 0]

    @property
    def green(self) -> np.ndarray:
        return self.pixels[:, :, 1]


@dataclass
class IndexRaster:
    """Per-pixel vegetation index, shape (H, W), values in [-1, 1]."""

    values: np.ndarray

    @property
    def height(self) -> int:
        return self.values.shape[0]

    @property
    def width(self) -> int:
        return self.values.shape[1]

    @property
    def pixel_count(self) -> int:
        return int(self.values.size)


@dataclass
class DiffRaster:
    """after - before, shape (H, W), values in [-2, 2]."""

    values: np.ndarray

    @property
    def height(self) -> int:
        return self.values.shape[0]

    @property
    def width(self) -> int:
        return self.values.shape[1]
