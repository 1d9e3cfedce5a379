"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from serverconf.l1_entities.config import Config
from serverconf.l1_entities.config_format import ConfigFormat
from serverconf.l4_frameworks_and_drivers.config import default_config

# --- Protocol-conforming Fakes ---


class FakeDecoder:
    """Fake ConfigDecoder that records calls and returns a canned Config."""

    def __init__(self, fmt: ConfigFormat, result: Config | None = None, error: Exception | None = None):
        self.format = fmt
        self._result = result or default_config()
        self._error = error
        self.decode_calls: list[str] = []

    def decode(self, path) -> Config:
        self.decode_calls.append(str(path))
        if self._error is not None:
            raise self._error
        return self._result


# --- Standard Fixtures ---


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str, str | bytes], Path]:
    """Write *content* to ``tmp_path / name`` and return the path."""

    def _write(name: str, content: str | bytes) -> Path:
        p = tmp_path / name
        if isinstance(content, bytes):
            p.write_bytes(content)
        else:
            p.write_text(content, encoding='utf-8')
        return p

    return _write


@pytest.fixture
def default_cfg() -> Config:
    return default_config()


@pytest.fixture
def tls_config_yaml(write_config) -> Path:
    content = """\
server:
  port: 9090
  enable_tls: true
  secret: "k"
  certificate: "c"
"""
    return write_config('config.yaml', content)


@pytest.fixture
def fake_yaml_decoder() -> FakeDecoder:
    return FakeDecoder(ConfigFormat.YAML)


@pytest.fixture
def fake_json_decoder() -> FakeDecoder:
    return FakeDecoder(ConfigFormat.JSON)
