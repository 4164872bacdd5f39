from __future__ import annotations


class RandgenError(Exception):
    """Base for configuration errors raised by distributions and generators."""


class InvalidConfigurationError(RandgenError, ValueError):
    pass


class NullArgumentError(RandgenError, TypeError):
    def __init__(self, name: str) -> None:
        super().__init__(f"{name} must not be None")
        self.name = name
