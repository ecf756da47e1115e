"""Aggregate pipeline result."""

from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional

from models.encoded_image import EncodedImage


@dataclass
class ChangeDetectionResult:
    """Result of one before/after comparison.

    ``status == 'no_data'`` means at least one input was placeholder
    content; metric fields are then ``None`` and no visualization exists.
    """

    status: Literal['ok', 'no_data']
    before_image: EncodedImage
    after_image: EncodedImage

    loss_percent: Optional[float] = None
    loss_pixel_count: Optional[int] = None
    total_pixel_count: Optional[int] = None
    severity: Optional[str] = None
    loss_threshold: Optional[float] = None
    visualization_image: Optional[EncodedImage] = None

    placeholder_inputs: List[str] = field(default_factory=list)
    index_stats: Dict[str, Dict[str, float]] = field(default_factory=dict)
    timings_ms: Dict[str, float] = field(default_factory=dict)

    @property
    def has_data(self) -> bool:
        return self.status == 'ok'

    def to_dict(self) -> dict:
        """Flat, JSON-friendly summary (image bytes excluded)."""
        return {
            'status': self.status,
            'loss_percent': self.loss_percent,
            'loss_pixel_count': self.loss_pixel_count,
            'total_pixel_count': self.total_pixel_count,
            'severity': self.severity,
            'loss_threshold': self.loss_threshold,
            'placeholder_inputs': list(self.placeholder_inputs),
            'index_stats': self.index_stats,
            'timings_ms': self.timings_ms,
        }
