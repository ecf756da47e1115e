"""Metrics: stage timing and index raster statistics."""

import time
from typing import Dict

import numpy as np


def compute_index_stats(values: np.ndarray) -> Dict[str, float]:
    """Mean/min/max/std of an index raster's values."""
    if values.size == 0:
        return {'mean': 0.0, 'min': 0.0, 'max': 0.0, 'std': 0.0}
    return {
        'mean': float(np.mean(values)),
        'min': float(np.min(values)),
        'max': float(np.max(values)),
        'std': float(np.std(values)),
    }


class Timer:
    """Wall-clock timer for named pipeline stages."""

    def __init__(self):
        self.timings_ms: Dict[str, float] = {}

    def measure(self, stage: str, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.record(stage, (time.perf_counter() - start) * 1000.0)
        return result

    def record(self, stage: str, elapsed_ms: float) -> None:
        self.timings_ms[stage] = self.timings_ms.get(stage, 0.0) + elapsed_ms

    @property
    def total_ms(self) -> float:
        return sum(self.timings_ms.values())
