"""Dependency container — composition root for wiring decoders and the loader."""

from __future__ import annotations

from collections.abc import Callable
from os import PathLike

from serverconf.l1_entities.config import Config
from serverconf.l2_use_cases.load_config_use_case import LoadConfigUseCase
from serverconf.l2_use_cases.ports.config_decoder import ConfigDecoder
from serverconf.l2_use_cases.ports.config_loader import ConfigLoader
from serverconf.l3_interface_adapters.gateways.json_config_decoder import JsonConfigDecoder
from serverconf.l3_interface_adapters.gateways.yaml_config_decoder import YamlConfigDecoder
from serverconf.l4_frameworks_and_drivers.config import config_defaults


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(self, defaults: Callable[[], dict] = config_defaults) -> None:
        self.decoders: list[ConfigDecoder] = [
            YamlConfigDecoder(defaults),
            JsonConfigDecoder(defaults),
        ]
        self.loader: ConfigLoader = LoadConfigUseCase(self.decoders)


def load_from_file(path: str | PathLike[str]) -> Config:
    """Load configuration from *path*, choosing the decoder by file extension.

    Raises InvalidFileTypeError, ConfigIOError or ConfigDecodeError. The result
    is not validated; call ``validate_config`` on it.
    """
    return DependencyContainer().loader.execute(path)
