"""Tests for the greenness index."""

import numpy as np
import pytest
from models.raster import PixelGrid
from engines.vegetation_index import compute_index


def _grid(pixels):
    return PixelGrid(pixels=np.asarray(pixels, dtype=np.uint8))


def test_index_range():
    """All index values lie in [-1, 1] for arbitrary pixels."""
    rng = np.random.default_rng(7)
    grid = _grid(rng.integers(0, 256, (64, 64, 3)))
    values = compute_index(grid).values
    assert values.min() >= -1.0
    assert values.max() <= 1.0


def test_index_shape_matches_grid():
    """Output has one value per pixel."""
    grid = _grid(np.zeros((20, 30, 3)))
    raster = compute_index(grid)
    assert raster.values.shape == (20, 30)
    assert raster.pixel_count == 600


def test_index_deterministic():
    """Identical grids give bit-identical rasters."""
    rng = np.random.default_rng(11)
    pixels = rng.integers(0, 256, (32, 32, 3))
    first = compute_index(_grid(pixels)).values
    second = compute_index(_grid(pixels.copy())).values
    assert np.array_equal(first, second)


def test_black_pixels_are_zero():
    """Epsilon avoids division by zero when both channels are zero."""
    values = compute_index(_grid(np.zeros((4, 4, 3)))).values
    assert np.all(np.isfinite(values))
    assert np.allclose(values, 0.0)


def test_extreme_red_and_green():
    """Pure red maps to about -1, pure green to about +1."""
    red = compute_index(_grid(np.tile([255, 0, 0], (4, 4, 1)))).values
    green = compute_index(_grid(np.tile([0, 255, 0], (4, 4, 1)))).values
    assert np.allclose(red, -1.0, atol=1e-5)
    assert np.allclose(green, 1.0, atol=1e-5)


def test_formula_matches_proxy():
    """Index is (g - r) / (g + r + eps) on normalized channels."""
    values = compute_index(_grid([[[100, 200, 50]]])).values
    r, g = 100 / 255, 200 / 255
    assert values[0, 0] == pytest.approx((g - r) / (g + r + 1e-6))


def test_blue_channel_ignored():
    """Only red and green contribute."""
    a = compute_index(_grid([[[80, 160, 0]]])).values
    b = compute_index(_grid([[[80, 160, 255]]])).values
    assert np.array_equal(a, b)


def test_four_channel_grid():
    """Extra channels do not change the result."""
    rgb = np.array([[[10, 90, 30]]], dtype=np.uint8)
    rgba = np.array([[[10, 90, 30, 255]]], dtype=np.uint8)
    assert np.array_equal(compute_index(_grid(rgb)).values, compute_index(_grid(rgba)).values)
