"""Gateway: YAML configuration decoder — implements ConfigDecoder port."""

from __future__ import annotations

from collections.abc import Callable
from os import PathLike

import yaml

from serverconf.l1_entities.config import Config
from serverconf.l1_entities.config_format import ConfigFormat
from serverconf.l1_entities.errors import ConfigDecodeError
from serverconf.l3_interface_adapters.gateways.config_overlay import overlay_config, read_config_bytes


class YamlConfigDecoder:
    """Decodes ``.yaml`` / ``.yml`` files onto a fresh defaults mapping."""

    format = ConfigFormat.YAML

    def __init__(self, defaults: Callable[[], dict]) -> None:
        self._defaults = defaults

    def decode(self, path: str | PathLike[str]) -> Config:
        raw = read_config_bytes(path)
        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as err:
            raise ConfigDecodeError(path, f'invalid YAML: {err}') from err
        return overlay_config(path, self._defaults(), data)
