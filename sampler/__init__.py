from __future__ import annotations

# Generator API: source binding, seeded construction, demo config

from .source import make_source, require_seed, require_source
from .generator import RandomGenerator, DistributionFactory
from .config import DemoConfig, load_demo_config

__all__ = [
    "make_source",
    "require_seed",
    "require_source",
    "RandomGenerator",
    "DistributionFactory",
    "DemoConfig",
    "load_demo_config",
]
