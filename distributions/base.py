"""Distribution capability.

A distribution turns a uniform source (anything with ``random() -> float`` in
[0, 1), e.g. ``numpy.random.Generator``) into one sampled value per call.
Implementations hold only immutable parameters; all mutable state lives in the
source that is passed in.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Distribution(ABC):
    @abstractmethod
    def sample(self, source: Any) -> Any:
        """Draw one value, advancing ``source``."""
        raise NotImplementedError
