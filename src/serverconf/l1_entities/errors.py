"""Domain error types."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from serverconf.l1_entities.violation import Violation


class ConfigError(Exception):
    """Base class for every error raised while loading or validating configuration."""


class InvalidFileTypeError(ConfigError):
    """Raised when a file extension does not map to a supported format."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Unsupported config file type '{self.path.suffix}': {self.path}")


class ConfigIOError(ConfigError):
    """Raised when a config file cannot be opened or read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f'Cannot read config file {self.path}: {reason}')


class ConfigDecodeError(ConfigError):
    """Raised when file content is malformed or does not fit the Config shape."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f'Cannot decode config file {self.path}: {reason}')


class ConfigValidationError(ConfigError):
    """Raised when a decoded config violates one or more rules."""

    def __init__(self, violations: Sequence[Violation]) -> None:
        self.violations = list(violations)
        detail = '; '.join(str(v) for v in self.violations)
        super().__init__(f'Invalid configuration: {detail}')
