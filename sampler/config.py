from __future__ import annotations

# Demo run configuration: dataclass + validate() + JSON loader

import json
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from distributions.errors import InvalidConfigurationError
from distributions.normal import NormalDistribution


_ALLOWED_KEYS = {"count", "mean", "std_dev", "seed"}


@dataclass
class DemoConfig:
    """Parameters for the normal-sampling demo. Defaults reproduce the ten-value standard normal run."""
    count: int = 10
    mean: float = 0.0
    std_dev: float = 1.0
    seed: Optional[int] = None  # None: OS entropy

    def validate(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise InvalidConfigurationError("count must be an integer")
        if self.count < 0:
            raise InvalidConfigurationError("count must be >= 0")
        if self.seed is not None:
            if isinstance(self.seed, bool) or not isinstance(self.seed, int):
                raise InvalidConfigurationError("seed must be an integer")
            if self.seed < 0:
                raise InvalidConfigurationError("seed must be >= 0")
        try:
            self.distribution()
        except TypeError as e:
            raise InvalidConfigurationError(str(e)) from e

    def distribution(self) -> NormalDistribution:
        return NormalDistribution.from_dict({"mean": self.mean, "std_dev": self.std_dev})

    def as_dict(self) -> Dict[str, Any]:
        """Normalized view; mean and std_dev come back as floats. Requires a valid config."""
        return {"count": self.count, **self.distribution().as_dict(), "seed": self.seed}

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "DemoConfig":
        if not isinstance(raw, Mapping):
            raise InvalidConfigurationError("demo config root must be an object")
        extra = sorted(k for k in raw.keys() if k not in _ALLOWED_KEYS)
        if extra:
            raise InvalidConfigurationError(f"unknown demo config keys: {extra}")
        cfg = cls(**{k: raw[k] for k in _ALLOWED_KEYS if k in raw})
        cfg.validate()
        return cfg


def load_demo_config(path: str) -> DemoConfig:
    """
    Load a demo config JSON object with optional keys {"count", "mean", "std_dev", "seed"}.

    Raises InvalidConfigurationError for a missing or unreadable path, non-UTF-8
    or malformed JSON, unknown keys, or values failing DemoConfig.validate().
    """
    if not isinstance(path, str) or not path:
        raise InvalidConfigurationError("load_demo_config: path must be a non-empty string")
    if not os.path.exists(path):
        raise InvalidConfigurationError(f"load_demo_config: file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidConfigurationError(f"load_demo_config: failed to parse JSON: {e}") from e
    except OSError as e:
        raise InvalidConfigurationError(f"load_demo_config: cannot read {path}: {e}") from e
    return DemoConfig.from_dict(raw)
