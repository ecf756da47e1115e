"""Change-detection parameters."""

from dataclasses import dataclass, replace
from typing import Literal

from utils.constants import CANONICAL_SIZE, INDEX_EPSILON, LOSS_THRESHOLD


@dataclass(frozen=True)
class DetectionParams:
    """Immutable run configuration, safe to share between concurrent runs."""

    canonical_width: int = CANONICAL_SIZE
    canonical_height: int = CANONICAL_SIZE
    loss_threshold: float = LOSS_THRESHOLD
    epsilon: float = INDEX_EPSILON
    interpolation: Literal['nearest', 'linear', 'area', 'cubic'] = 'area'
    fit: Literal['cover', 'fill'] = 'cover'
    max_workers: int = 2

    def __post_init__(self):
        if self.canonical_width < 1 or self.canonical_height < 1:
            raise ValueError(
                f"Canonical size must be positive, got {self.canonical_width}x{self.canonical_height}"
            )
        if not (-2.0 <= self.loss_threshold <= 2.0):
            raise ValueError(f"Loss threshold must be in [-2, 2], got {self.loss_threshold}")
        if self.epsilon <= 0:
            raise ValueError(f"Epsilon must be positive, got {self.epsilon}")
        if self.interpolation not in ('nearest', 'linear', 'area', 'cubic'):
            raise ValueError(f"Unknown interpolation: {self.interpolation}")
        if self.fit not in ('cover', 'fill'):
            raise ValueError(f"Unknown fit: {self.fit}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")

    def with_threshold(self, loss_threshold: float) -> 'DetectionParams':
        """Copy with a different loss threshold."""
        return replace(self, loss_threshold=loss_threshold)
