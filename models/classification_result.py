"""Per-comparison loss classification."""

from dataclasses import dataclass
import numpy as np

from models.raster import DiffRaster


@dataclass
class ClassificationResult:
    """Output of differencing two index rasters.

    gain_pixel_count (diff > |loss_threshold|) is informational only and
    plays no part in loss_percent or severity.
    """

    loss_percent: float
    loss_pixel_count: int
    gain_pixel_count: int
    total_pixel_count: int
    loss_threshold: float
    severity: str

    diff: DiffRaster
    loss_mask: np.ndarray
    visualization: np.ndarray  # (H, W) uint8, 127 = no change
