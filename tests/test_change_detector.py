"""Tests for differencing, loss classification and severity."""

import numpy as np
import pytest
from models.raster import IndexRaster, DiffRaster
from models.errors import DimensionMismatchError, EmptyRasterError
from engines.change_detector import (
    classify_severity, difference, visualize_difference, detect_change
)


def _raster(value, shape=(16, 16)):
    return IndexRaster(values=np.full(shape, value, dtype=np.float64))


def test_identical_rasters_no_change():
    """Same raster twice: no loss, every visualization pixel 127."""
    rng = np.random.default_rng(3)
    raster = IndexRaster(values=rng.uniform(-1, 1, (32, 32)))
    result = detect_change(raster, raster)
    assert result.loss_percent == 0.0
    assert result.loss_pixel_count == 0
    assert np.all(result.visualization == 127)


def test_full_loss():
    """Index 0.0 -> -0.3 everywhere is 100% loss."""
    result = detect_change(_raster(0.0), _raster(-0.3))
    assert result.loss_percent == 100.0
    assert result.loss_pixel_count == result.total_pixel_count == 256
    assert result.severity == 'critical'


def test_max_gain():
    """Index -1 -> +1 is all gain, no loss, visualization saturates at 255."""
    result = detect_change(_raster(-1.0), _raster(1.0))
    assert result.loss_percent == 0.0
    assert result.gain_pixel_count == 256
    assert np.all(result.visualization == 255)


def test_diff_is_after_minus_before():
    """diff[i] == after[i] - before[i] exactly."""
    rng = np.random.default_rng(5)
    before = IndexRaster(values=rng.uniform(-1, 1, (8, 8)))
    after = IndexRaster(values=rng.uniform(-1, 1, (8, 8)))
    diff = difference(before, after)
    assert np.array_equal(diff.values, after.values - before.values)


def test_loss_count_matches_threshold():
    """Loss pixel count equals count of diff < threshold."""
    rng = np.random.default_rng(9)
    before = IndexRaster(values=rng.uniform(-1, 1, (50, 40)))
    after = IndexRaster(values=rng.uniform(-1, 1, (50, 40)))
    result = detect_change(before, after, loss_threshold=-0.2)
    expected = int(np.sum((after.values - before.values) < -0.2))
    assert result.loss_pixel_count == expected
    assert result.total_pixel_count == 2000
    assert abs(result.loss_percent - 100.0 * expected / 2000) < 1e-9
    assert np.array_equal(result.loss_mask, (after.values - before.values) < -0.2)


def test_threshold_is_overridable():
    """A looser threshold no longer counts the drop as loss."""
    result = detect_change(_raster(0.0), _raster(-0.3), loss_threshold=-0.5)
    assert result.loss_percent == 0.0
    assert result.loss_threshold == -0.5


def test_threshold_is_strict():
    """diff equal to the threshold is not loss."""
    result = detect_change(_raster(0.5), _raster(0.25), loss_threshold=-0.25)
    assert result.loss_pixel_count == 0


def test_visualization_monotonic_and_clamped():
    """Visualization is non-decreasing in diff and stays in [0, 255]."""
    diffs = np.linspace(-2.5, 2.5, 1001).reshape(1, -1)
    vis = visualize_difference(DiffRaster(values=diffs)).ravel().astype(int)
    assert vis.min() == 0
    assert vis.max() == 255
    assert np.all(np.diff(vis) >= 0)


def test_visualization_known_levels():
    """-1 maps to 0, 0 to 127, +1 to 254."""
    vis = visualize_difference(DiffRaster(values=np.array([[-1.0, 0.0, 1.0]])))
    assert vis.tolist() == [[0, 127, 254]]


def test_dimension_mismatch():
    """Different shapes are rejected."""
    with pytest.raises(DimensionMismatchError):
        detect_change(_raster(0.0, (4, 4)), _raster(0.0, (4, 5)))


def test_empty_raster():
    """Zero-pixel rasters are rejected."""
    with pytest.raises(EmptyRasterError):
        detect_change(_raster(0.0, (0, 0)), _raster(0.0, (0, 0)))


@pytest.mark.parametrize("loss_percent, expected", [
    (0.0, 'low'),
    (5.0, 'low'),
    (5.01, 'moderate'),
    (10.0, 'moderate'),
    (10.5, 'high'),
    (20.0, 'high'),
    (20.01, 'critical'),
    (100.0, 'critical'),
])
def test_severity_bands(loss_percent, expected):
    """Severity bands use strict lower bounds."""
    assert classify_severity(loss_percent) == expected
