"""Baseline configuration values — the seed every file is overlaid onto."""

from __future__ import annotations

import copy

from serverconf.l1_entities.config import Config

CONFIG_DEFAULTS: dict = {
    'server': {
        'port': 8080,
        'enable_tls': False,
        'secret': '',
        'certificate': '',
    },
}


def config_defaults() -> dict:
    """Fresh deep copy of CONFIG_DEFAULTS, safe for a decoder to mutate."""
    return copy.deepcopy(CONFIG_DEFAULTS)


def default_config() -> Config:
    """Baseline Config with no file applied. Always satisfies the TLS rule."""
    return Config.model_validate(config_defaults())
