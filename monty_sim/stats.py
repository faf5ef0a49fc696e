"""Cross-run reductions over per-run win percentages."""

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np


def mean(samples: Sequence[float]) -> float:
    """Arithmetic mean; 0.0 for an empty sample so reports stay printable."""
    arr = np.asarray(samples, dtype=np.float64)
    if arr.size == 0:
        return 0.0
    return float(arr.mean())


def sample_stddev(samples: Sequence[float]) -> Optional[float]:
    """Standard deviation with the n - 1 denominator, None below two samples."""
    arr = np.asarray(samples, dtype=np.float64)
    if arr.size < 2:
        return None
    return float(arr.std(ddof=1))


@dataclass
class StrategySummary:
    samples: int
    mean: float
    stddev: Optional[float]

    @property
    def enough_samples(self) -> bool:
        return self.stddev is not None


def summarize(samples: Sequence[float]) -> StrategySummary:
    return StrategySummary(
        samples=len(samples),
        mean=mean(samples),
        stddev=sample_stddev(samples),
    )
