from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Optional

import numpy as np

from distributions.base import Distribution
from distributions.errors import NullArgumentError
from distributions.normal import NormalDistribution
from .source import make_source, require_seed, require_source

logger = logging.getLogger(__name__)

DistributionFactory = Callable[[], Distribution]


class RandomGenerator:
    """
    Binds a uniform source to a distribution strategy.

    Construction
      RandomGenerator(source, distribution)   injected, both required
      RandomGenerator.unseeded(factory)       owned source, OS entropy
      RandomGenerator.from_seed(seed, factory) owned deterministic source

    ``factory`` is a distribution class or any zero-argument callable; it
    defaults to the standard normal.

    Not thread-safe: every draw advances the source, so callers sharing a
    generator (or an injected source) must serialize access themselves.
    """

    def __init__(self, source: Any, distribution: Distribution) -> None:
        self._source = require_source(source, "source")
        if distribution is None:
            raise NullArgumentError("distribution")
        if not callable(getattr(distribution, "sample", None)):
            raise TypeError("distribution must provide sample(source)")
        self._distribution = distribution
        logger.debug("generator bound: source=%s distribution=%r", type(source).__name__, distribution)

    @classmethod
    def unseeded(cls, factory: DistributionFactory = NormalDistribution) -> "RandomGenerator":
        return cls(make_source(), _build(factory))

    @classmethod
    def from_seed(cls, seed: int, factory: DistributionFactory = NormalDistribution) -> "RandomGenerator":
        require_seed(seed)
        return cls(make_source(seed), _build(factory))

    @property
    def source(self) -> Any:
        return self._source

    @property
    def distribution(self) -> Distribution:
        return self._distribution

    def next(self) -> Any:
        return self._distribution.sample(self._source)

    def take(self, n: int) -> np.ndarray:
        """Next ``n`` values as float64, identical to ``n`` successive ``next()`` calls."""
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise TypeError("n must be an integer")
        if n < 0:
            raise ValueError("n must be >= 0")
        return np.fromiter((self.next() for _ in range(int(n))), dtype=np.float64, count=int(n))

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        return self.next()

    def __repr__(self) -> str:
        return f"RandomGenerator(source={type(self._source).__name__}, distribution={self._distribution!r})"


def _build(factory: Optional[DistributionFactory]) -> Distribution:
    if factory is None:
        raise NullArgumentError("factory")
    return factory()
