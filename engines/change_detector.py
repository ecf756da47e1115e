"""Index differencing, loss classification and aggregation."""

import logging

import numpy as np

from models.classification_result import ClassificationResult
from models.errors import DimensionMismatchError, EmptyRasterError
from models.raster import IndexRaster, DiffRaster
from utils.constants import (
    LOSS_THRESHOLD, NO_CHANGE_LEVEL, SEVERITY_BANDS, DEFAULT_SEVERITY
)

logger = logging.getLogger(__name__)


def classify_severity(loss_percent: float) -> str:
    """Severity band of a loss percentage: critical, high, moderate or low."""
    for lower_bound, label in SEVERITY_BANDS:
        if loss_percent > lower_bound:
            return label
    return DEFAULT_SEVERITY


def _check_shapes(before: IndexRaster, after: IndexRaster) -> None:
    if before.values.shape != after.values.shape:
        raise DimensionMismatchError(
            f"Before raster is {before.values.shape}, after raster is {after.values.shape}"
        )


def difference(before: IndexRaster, after: IndexRaster) -> DiffRaster:
    """after - before, per pixel."""
    _check_shapes(before, after)
    return DiffRaster(values=after.values - before.values)


def visualize_difference(diff: DiffRaster) -> np.ndarray:
    """Map diff [-2, 2] onto uint8 with 127 = no change (round half up)."""
    scaled = np.floor((diff.values + 1.0) * NO_CHANGE_LEVEL + 0.5)
    return np.clip(scaled, 0, 255).astype(np.uint8)


def detect_change(
    before: IndexRaster,
    after: IndexRaster,
    loss_threshold: float = LOSS_THRESHOLD
) -> ClassificationResult:
    """Difference two index rasters and count pixels below loss_threshold."""
    _check_shapes(before, after)
    total = before.pixel_count
    if total == 0:
        raise EmptyRasterError("Cannot detect change on a zero-pixel raster")

    diff = difference(before, after)
    loss_mask = diff.values < loss_threshold
    loss_count = int(np.count_nonzero(loss_mask))
    gain_count = int(np.count_nonzero(diff.values > abs(loss_threshold)))
    loss_percent = 100.0 * loss_count / total

    logger.debug(
        f"Loss {loss_count}/{total} pixels ({loss_percent:.2f}%) "
        f"below threshold {loss_threshold}, gain {gain_count}"
    )

    return ClassificationResult(
        loss_percent=loss_percent,
        loss_pixel_count=loss_count,
        gain_pixel_count=gain_count,
        total_pixel_count=total,
        loss_threshold=loss_threshold,
        severity=classify_severity(loss_percent),
        diff=diff,
        loss_mask=loss_mask,
        visualization=visualize_difference(diff),
    )
