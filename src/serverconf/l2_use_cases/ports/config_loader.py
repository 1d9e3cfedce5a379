"""Port: configuration loader."""

from __future__ import annotations

from os import PathLike
from typing import Protocol

from serverconf.l1_entities.config import Config


class ConfigLoader(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract configuration loader."""

    def execute(self, path: str | PathLike[str]) -> Config:
        """Load configuration from *path*. Does not validate."""
        ...
