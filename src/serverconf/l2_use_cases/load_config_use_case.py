"""Use case: load a configuration file through the decoder matching its extension."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from os import PathLike

from serverconf.l1_entities.config import Config
from serverconf.l1_entities.errors import InvalidFileTypeError
from serverconf.l2_use_cases.ports.config_decoder import ConfigDecoder
from serverconf.l2_use_cases.resolve_format_use_case import resolve_format

log = logging.getLogger('serverconf.loader')


class LoadConfigUseCase:
    """Resolves the file format, then delegates to the registered decoder.

    Errors from the resolver and the decoder propagate unchanged. No validation
    happens here; callers run the validator explicitly.
    """

    def __init__(self, decoders: Iterable[ConfigDecoder]) -> None:
        self._decoders = {decoder.format: decoder for decoder in decoders}

    def execute(self, path: str | PathLike[str]) -> Config:
        fmt = resolve_format(path)
        decoder = self._decoders.get(fmt)
        if decoder is None:
            raise InvalidFileTypeError(path)
        log.debug('loading config path=%s format=%s', path, fmt.value)
        config = decoder.decode(path)
        log.debug('loaded config path=%s port=%d tls=%s', path, config.server.port, config.server.enable_tls)
        return config
