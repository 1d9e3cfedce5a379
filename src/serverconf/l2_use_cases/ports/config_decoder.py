"""Port: format-specific configuration decoder."""

from __future__ import annotations

from os import PathLike
from typing import Protocol

from serverconf.l1_entities.config import Config
from serverconf.l1_entities.config_format import ConfigFormat


class ConfigDecoder(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Reads one file format and overlays it onto the default configuration."""

    format: ConfigFormat

    def decode(self, path: str | PathLike[str]) -> Config:
        """Decode *path* onto fresh defaults. Raises ConfigIOError or ConfigDecodeError."""
        ...
