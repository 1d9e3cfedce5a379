"""L1 entity: supported configuration file formats."""

from __future__ import annotations

import enum


class ConfigFormat(enum.Enum):
    YAML = 'yaml'
    JSON = 'json'
