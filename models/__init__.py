"""Data models for rasters, parameters and results."""

from .errors import (
    PipelineError,
    UnsupportedFormatError,
    DecodeError,
    DimensionMismatchError,
    EmptyRasterError,
    EncodeError,
    CancelledError,
    FetchTimeoutError,
)
from .encoded_image import EncodedImage, sniff_format
from .raster import PixelGrid, IndexRaster, DiffRaster
from .detection_params import DetectionParams
from .classification_result import ClassificationResult
from .change_detection_result import ChangeDetectionResult

__all__ = [
    'PipelineError',
    'UnsupportedFormatError',
    'DecodeError',
    'DimensionMismatchError',
    'EmptyRasterError',
    'EncodeError',
    'CancelledError',
    'FetchTimeoutError',
    'EncodedImage',
    'sniff_format',
    'PixelGrid',
    'IndexRaster',
    'DiffRaster',
    'DetectionParams',
    'ClassificationResult',
    'ChangeDetectionResult',
]
