from __future__ import annotations

# Distribution strategies and the shared error taxonomy

from .errors import RandgenError, InvalidConfigurationError, NullArgumentError
from .base import Distribution
from .normal import NormalDistribution
from .stats import SampleSummary, summarize

__all__ = [
    "RandgenError",
    "InvalidConfigurationError",
    "NullArgumentError",
    "Distribution",
    "NormalDistribution",
    "SampleSummary",
    "summarize",
]
