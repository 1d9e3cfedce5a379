"""Tests for the shared overlay helpers used by both decoders."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from serverconf.l1_entities.errors import ConfigDecodeError, ConfigIOError
from serverconf.l3_interface_adapters.gateways.config_overlay import deep_merge, overlay_config, read_config_bytes
from serverconf.l4_frameworks_and_drivers.config import config_defaults


class TestReadConfigBytes:
    def test_reads_exact_bytes(self, write_config):
        p = write_config('data.json', b'test\n')
        assert read_config_bytes(p) == b'test\n'

    def test_accepts_str_path(self, write_config):
        p = write_config('data.json', b'{}')
        assert read_config_bytes(str(p)) == b'{}'

    def test_missing_file_raises_io_error(self, tmp_path: Path):
        with pytest.raises(ConfigIOError) as exc_info:
            read_config_bytes(tmp_path / 'notfound.json')
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        assert exc_info.value.path == tmp_path / 'notfound.json'

    def test_directory_raises_io_error(self, tmp_path: Path):
        d = tmp_path / 'dir.yaml'
        d.mkdir()
        with pytest.raises(ConfigIOError):
            read_config_bytes(d)

    @pytest.mark.skipif(os.name == 'nt' or os.geteuid() == 0, reason='permission bits not enforced')
    def test_unreadable_file_raises_io_error(self, write_config):
        p = write_config('secret.yaml', 'server: {}\n')
        p.chmod(0)
        try:
            with pytest.raises(ConfigIOError):
                read_config_bytes(p)
        finally:
            p.chmod(0o600)


class TestDeepMerge:
    def test_nested_merge(self):
        base = {'a': {'x': 1, 'y': 2}, 'b': 3}
        override = {'a': {'y': 99, 'z': 100}, 'c': 4}
        result = deep_merge(base, override)
        assert result == {'a': {'x': 1, 'y': 99, 'z': 100}, 'b': 3, 'c': 4}

    def test_override_replaces_non_dict(self):
        result = deep_merge({'a': 'old'}, {'a': 'new'})
        assert result['a'] == 'new'

    def test_override_scalar_over_dict(self):
        result = deep_merge({'a': {'nested': True}}, {'a': 'flat'})
        assert result['a'] == 'flat'

    def test_none_leaves_base_untouched(self):
        result = deep_merge({'a': {'x': 1}, 'b': 2}, {'a': None, 'b': None})
        assert result == {'a': {'x': 1}, 'b': 2}

    def test_empty_string_overrides(self):
        result = deep_merge({'a': 'value'}, {'a': ''})
        assert result['a'] == ''


class TestOverlayConfig:
    def test_none_data_yields_defaults(self, default_cfg):
        assert overlay_config('x.yaml', config_defaults(), None) == default_cfg

    def test_partial_section_keeps_other_defaults(self):
        cfg = overlay_config('x.json', config_defaults(), {'server': {'port': 9090}})
        assert cfg.server.port == 9090
        assert cfg.server.enable_tls is False
        assert cfg.server.secret_key_path == ''
        assert cfg.server.certificate_path == ''

    @pytest.mark.parametrize('data', [[1, 2], 'text', 42, True])
    def test_non_mapping_top_level_raises(self, data):
        with pytest.raises(ConfigDecodeError):
            overlay_config('x.json', config_defaults(), data)

    def test_wrong_field_type_raises_with_location(self):
        with pytest.raises(ConfigDecodeError) as exc_info:
            overlay_config('x.json', config_defaults(), {'server': {'port': 'abc'}})
        assert 'server.port' in str(exc_info.value)

    def test_server_not_mapping_raises(self):
        with pytest.raises(ConfigDecodeError):
            overlay_config('x.json', config_defaults(), {'server': ['a']})
