"""Uniform random sources.

A source is any object exposing ``random() -> float`` in [0, 1). Internally
owned sources are ``numpy.random.Generator`` instances (PCG64), which keeps
seeded sequences stable across platforms and numpy releases.
"""
from __future__ import annotations

from typing import Any, Optional

import numpy as np

from distributions.errors import NullArgumentError


def require_seed(val: Any, name: str = "seed") -> None:
    if isinstance(val, bool) or not isinstance(val, (int, np.integer)):
        raise TypeError(f"{name} must be an integer; got type {type(val).__name__}.")


def make_source(seed: Optional[int] = None) -> np.random.Generator:
    """Fresh PCG64 generator; OS entropy when ``seed`` is None."""
    if seed is None:
        return np.random.default_rng()
    require_seed(seed)
    return np.random.default_rng(int(seed))


def require_source(source: Any, name: str = "source") -> Any:
    if source is None:
        raise NullArgumentError(name)
    if not callable(getattr(source, "random", None)):
        raise TypeError(f"{name} must provide random() -> float in [0, 1)")
    return source
