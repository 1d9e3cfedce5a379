"""Shared decoder plumbing: read raw bytes, overlay parsed data onto defaults, build Config."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from serverconf.l1_entities.config import Config
from serverconf.l1_entities.errors import ConfigDecodeError, ConfigIOError

log = logging.getLogger('serverconf.decoder')


def read_config_bytes(path: str | PathLike[str]) -> bytes:
    """Read the whole file. Raises ConfigIOError for missing/unreadable paths."""
    try:
        data = Path(path).read_bytes()
    except OSError as err:
        raise ConfigIOError(path, err.strerror or str(err)) from err
    log.debug('read %d bytes from %s', len(data), path)
    return data


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base).

    A ``None`` value in *override* counts as absent and leaves *base* untouched.
    """
    for key, value in override.items():
        if value is None:
            continue
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def overlay_config(path: str | PathLike[str], seed: dict, data: Any) -> Config:
    """Overlay parsed file *data* onto *seed* and validate the Config shape.

    *seed* is consumed (mutated); pass a fresh copy. ``None`` data (an empty
    document) yields the seed unchanged.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigDecodeError(path, f'top-level value must be a mapping, got {type(data).__name__}')
    merged = deep_merge(seed, data)
    try:
        return Config.model_validate(merged)
    except ValidationError as err:
        raise ConfigDecodeError(path, _describe(err)) from err


def _describe(err: ValidationError) -> str:
    parts = []
    for item in err.errors():
        loc = '.'.join(str(p) for p in item['loc'])
        parts.append(f'{loc}: {item["msg"]}')
    return '; '.join(parts)
