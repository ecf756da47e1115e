"""Shared utilities."""

from .constants import CANONICAL_SIZE, LOSS_THRESHOLD, INDEX_EPSILON, FOREST_BBOXES
from .metrics import compute_index_stats, Timer
from .test_images import generate_solid, generate_forest_scene, generate_cleared_scene
from .image_io import load_image_bytes, save_image_bytes, encode_rgb
from .logging_config import configure_logging

__all__ = [
    'CANONICAL_SIZE',
    'LOSS_THRESHOLD',
    'INDEX_EPSILON',
    'FOREST_BBOXES',
    'compute_index_stats',
    'Timer',
    'generate_solid',
    'generate_forest_scene',
    'generate_cleared_scene',
    'load_image_bytes',
    'save_image_bytes',
    'encode_rgb',
    'configure_logging',
]
