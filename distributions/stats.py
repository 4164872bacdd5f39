from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np


@dataclass(frozen=True)
class SampleSummary:
    count: int
    mean: float
    std: float


def summarize(samples: Iterable[float] | np.ndarray) -> SampleSummary:
    """Sample mean and (ddof=1) standard deviation; std is 0.0 for fewer than two values."""
    x = np.asarray(list(samples) if not isinstance(samples, np.ndarray) else samples, dtype=np.float64)
    if x.ndim != 1:
        raise ValueError("samples must be one-dimensional")
    n = int(x.size)
    if n == 0:
        raise ValueError("samples must be non-empty")
    mean = float(np.mean(x))
    std = float(np.std(x, ddof=1)) if n > 1 else 0.0
    return SampleSummary(count=n, mean=mean, std=std)
