"""Normal (Gaussian) distribution sampled with the Marsaglia polar method.

Invariants
- ``std_dev > 0`` and both parameters finite, checked once at construction.
- ``sample`` is pure apart from advancing the supplied source.
- One deviate per accepted pair; the partner deviate ``u2 * w`` is dropped, so
  output order depends only on the source sequence, never on call history.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .base import Distribution
from .errors import InvalidConfigurationError

logger = logging.getLogger(__name__)


def _finite_param(x: object, name: str) -> float:
    try:
        val = float(x)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise TypeError(f"{name} must be a real number convertible to float") from e
    if not math.isfinite(val):
        raise InvalidConfigurationError(f"{name} must be finite, got {val}")
    return val


@dataclass(frozen=True)
class NormalDistribution(Distribution):
    mean: float = 0.0
    std_dev: float = 1.0

    def __post_init__(self) -> None:
        mean = _finite_param(self.mean, "mean")
        std_dev = _finite_param(self.std_dev, "std_dev")
        if std_dev <= 0.0:
            raise InvalidConfigurationError(f"std_dev must be positive, got {std_dev}")
        object.__setattr__(self, "mean", mean)
        object.__setattr__(self, "std_dev", std_dev)
        logger.debug("normal distribution: mean=%g std_dev=%g", mean, std_dev)

    def sample(self, source: Any) -> float:
        """
        Draw one value from Normal(mean, std_dev).

        Points (u1, u2) are drawn uniformly in [-1, 1)^2 and rejected until they
        fall strictly inside the unit disk and off the origin; the expected
        number of rounds is 4/pi.
        """
        while True:
            u1 = 2.0 * source.random() - 1.0
            u2 = 2.0 * source.random() - 1.0
            w = u1 * u1 + u2 * u2
            if 0.0 < w < 1.0:
                break
        w = math.sqrt(-2.0 * math.log(w) / w)
        return float(self.mean + self.std_dev * u1 * w)

    @classmethod
    def from_dict(cls, cfg: Optional[Mapping[str, Any]] = None) -> "NormalDistribution":
        """Build from ``{"mean": float, "std_dev": float}``; missing keys use the standard normal."""
        cfg = cfg or {}
        unknown = set(cfg) - {"mean", "std_dev"}
        if unknown:
            raise InvalidConfigurationError(f"unknown normal distribution keys: {sorted(unknown)}")
        return cls(mean=cfg.get("mean", 0.0), std_dev=cfg.get("std_dev", 1.0))

    def as_dict(self) -> Dict[str, float]:
        return {"mean": self.mean, "std_dev": self.std_dev}
