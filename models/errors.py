"""Pipeline error types."""


class PipelineError(Exception):
    """Base class for errors that abort a change-detection run."""


class UnsupportedFormatError(PipelineError):
    """Non-raster content (e.g. SVG placeholder markup) reached the decoder."""


class DecodeError(PipelineError):
    """Raster bytes are empty, truncated, corrupt or not decodable."""


class DimensionMismatchError(PipelineError):
    """Before/after rasters do not share the same width and height."""


class EmptyRasterError(PipelineError):
    """Raster has zero pixels."""


class EncodeError(PipelineError):
    """Visualization raster could not be encoded."""


class CancelledError(PipelineError):
    """Caller requested cancellation before the run completed."""


class FetchTimeoutError(PipelineError):
    """Image source did not deliver bytes within the caller's timeout."""
