"""Change-detection engines - pure computation, no I/O beyond bytes in memory."""

from .raster_decoder import decode_image, INTERPOLATION_MODES, FIT_MODES
from .vegetation_index import compute_index
from .change_detector import classify_severity, difference, visualize_difference, detect_change
from .visualization_encoder import encode_visualization, decode_visualization
from .image_source import (
    ImageSourceProvider,
    RealImage,
    PlaceholderImage,
    InMemoryImageSource,
    classify_source_bytes,
    render_placeholder_svg,
    make_placeholder,
)
from .pipeline import ChangeDetectionPipeline, run_change_detection

__all__ = [
    'decode_image',
    'INTERPOLATION_MODES',
    'FIT_MODES',
    'compute_index',
    'classify_severity',
    'difference',
    'visualize_difference',
    'detect_change',
    'encode_visualization',
    'decode_visualization',
    'ImageSourceProvider',
    'RealImage',
    'PlaceholderImage',
    'InMemoryImageSource',
    'classify_source_bytes',
    'render_placeholder_svg',
    'make_placeholder',
    'ChangeDetectionPipeline',
    'run_change_detection',
]
