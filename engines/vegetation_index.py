"""Two-band greenness index.

(G - R) / (G + R + eps) over normalized red and green. No near-infrared
band is available from RGB sources, so this is a proxy and not NDVI; the
loss threshold is calibrated against it.
"""

import numpy as np

from models.raster import PixelGrid, IndexRaster
from utils.constants import INDEX_EPSILON


def compute_index(grid: PixelGrid, epsilon: float = INDEX_EPSILON) -> IndexRaster:
    """Per-pixel greenness index in [-1, 1], shape (H, W)."""
    r = grid.red.astype(np.float64) / 255.0
    g = grid.green.astype(np.float64) / 255.0
    return IndexRaster(values=(g - r) / (g + r + epsilon))
