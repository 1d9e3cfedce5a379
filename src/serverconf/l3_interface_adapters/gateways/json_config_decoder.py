"""Gateway: JSON configuration decoder — implements ConfigDecoder port."""

from __future__ import annotations

import json
from collections.abc import Callable
from os import PathLike

from serverconf.l1_entities.config import Config
from serverconf.l1_entities.config_format import ConfigFormat
from serverconf.l1_entities.errors import ConfigDecodeError
from serverconf.l3_interface_adapters.gateways.config_overlay import overlay_config, read_config_bytes


class JsonConfigDecoder:
    """Decodes ``.json`` files onto a fresh defaults mapping."""

    format = ConfigFormat.JSON

    def __init__(self, defaults: Callable[[], dict]) -> None:
        self._defaults = defaults

    def decode(self, path: str | PathLike[str]) -> Config:
        raw = read_config_bytes(path)
        try:
            data = json.loads(raw)
        except ValueError as err:  # JSONDecodeError and UnicodeDecodeError
            raise ConfigDecodeError(path, f'invalid JSON: {err}') from err
        return overlay_config(path, self._defaults(), data)
