"""Use case: map a config file path to its serialization format."""

from __future__ import annotations

from os import PathLike
from pathlib import PurePath
from types import MappingProxyType

from serverconf.l1_entities.config_format import ConfigFormat
from serverconf.l1_entities.errors import InvalidFileTypeError

# Matched verbatim: '.YAML' is not '.yaml'.
FORMAT_BY_EXTENSION = MappingProxyType(
    {
        '.yaml': ConfigFormat.YAML,
        '.yml': ConfigFormat.YAML,
        '.json': ConfigFormat.JSON,
    }
)


def resolve_format(path: str | PathLike[str]) -> ConfigFormat:
    """Return the format for *path*'s extension. Raises InvalidFileTypeError otherwise."""
    name = PurePath(path).name
    # Unlike PurePath.suffix, a bare dotfile such as '.yaml' keeps its extension.
    suffix = name[name.rfind('.') :] if '.' in name else ''
    try:
        return FORMAT_BY_EXTENSION[suffix]
    except KeyError:
        raise InvalidFileTypeError(path) from None
