"""Tests for configuration storage in core/config.py"""

import json
from pathlib import Path

import pytest

from core.config import (
    CONFIG_FILE,
    BRIDGE_IP_KEY,
    USERNAME_KEY,
    ClientSettings,
    ConfigBackend,
    ConfigStore,
    FileConfigBackend,
    KeyValueConfigBackend,
    file_store,
)


class TestConstants:
    """Test that constants and default settings are properly defined."""

    def test_config_file_path(self):
        """CONFIG_FILE should be .hue-scene-mgr.json in the working directory."""
        assert isinstance(CONFIG_FILE, Path)
        assert CONFIG_FILE.name == '.hue-scene-mgr.json'

    def test_default_settings(self):
        """Default settings match the bridge defaults."""
        settings = ClientSettings()
        assert settings.device_type == 'hue-scene-mgr'
        assert settings.discovery_url == 'https://discovery.meethue.com/'
        assert settings.timeout is None

    def test_settings_are_immutable(self):
        """ClientSettings cannot be changed after construction."""
        settings = ClientSettings()
        with pytest.raises(AttributeError):
            settings.device_type = 'other'


class TestFileConfigBackend:
    """Tests for the JSON file backend."""

    def test_missing_file_loads_none(self, tmp_path):
        """A missing file behaves like an empty config."""
        backend = FileConfigBackend(tmp_path / 'config.json')
        assert backend.load(USERNAME_KEY) is None

    def test_save_then_load(self, tmp_path):
        """A saved value can be loaded back."""
        backend = FileConfigBackend(tmp_path / 'config.json')
        backend.save(BRIDGE_IP_KEY, '192.168.1.20')
        assert backend.load(BRIDGE_IP_KEY) == '192.168.1.20'

    def test_survives_new_instance(self, tmp_path):
        """Values persist across backend instances (i.e. process restarts)."""
        path = tmp_path / 'config.json'
        FileConfigBackend(path).save(USERNAME_KEY, 'abc123')
        assert FileConfigBackend(path).load(USERNAME_KEY) == 'abc123'

    def test_save_keeps_other_keys(self, tmp_path):
        """Saving one key leaves the others in place."""
        backend = FileConfigBackend(tmp_path / 'config.json')
        backend.save(BRIDGE_IP_KEY, '10.0.0.2')
        backend.save(USERNAME_KEY, 'abc123')
        assert backend.read_all() == {BRIDGE_IP_KEY: '10.0.0.2', USERNAME_KEY: 'abc123'}

    def test_save_replaces_nested_value(self, tmp_path):
        """Nested objects are replaced wholesale, not merged."""
        backend = FileConfigBackend(tmp_path / 'config.json')
        backend.save('filters', {'group': '1', 'type': 'Room'})
        backend.save('filters', {'group': '2'})
        assert backend.load('filters') == {'group': '2'}

    def test_written_as_pretty_json(self, tmp_path):
        """The file is written as JSON indented by two spaces."""
        path = tmp_path / 'config.json'
        FileConfigBackend(path).save(USERNAME_KEY, 'abc123')
        assert path.read_text() == json.dumps({USERNAME_KEY: 'abc123'}, indent=2)

    def test_creates_parent_directory(self, tmp_path):
        """Missing parent directories are created on save."""
        path = tmp_path / 'nested' / 'config.json'
        FileConfigBackend(path).save(USERNAME_KEY, 'abc123')
        assert path.exists()

    def test_corrupt_file_treated_as_empty(self, tmp_path):
        """An unparseable file loads as empty and is overwritten on save."""
        path = tmp_path / 'config.json'
        path.write_text('{not json')
        backend = FileConfigBackend(path)

        assert backend.load(USERNAME_KEY) is None

        backend.save(BRIDGE_IP_KEY, '10.0.0.2')
        assert json.loads(path.read_text()) == {BRIDGE_IP_KEY: '10.0.0.2'}

    def test_non_object_file_treated_as_empty(self, tmp_path):
        """A file holding valid JSON that is not an object loads as empty."""
        path = tmp_path / 'config.json'
        path.write_text('[1, 2, 3]')
        assert FileConfigBackend(path).read_all() == {}


class TestKeyValueConfigBackend:
    """Tests for the key-value storage backend."""

    def test_values_stored_as_json_text(self):
        """Each value is stored as JSON text under its own key."""
        storage = {}
        backend = KeyValueConfigBackend(storage)
        backend.save(USERNAME_KEY, 'abc123')
        assert storage == {USERNAME_KEY: '"abc123"'}

    def test_save_then_load(self):
        """A saved value can be loaded back."""
        backend = KeyValueConfigBackend()
        backend.save('filters', {'group': '1'})
        assert backend.load('filters') == {'group': '1'}

    def test_missing_key_loads_none(self):
        """A key that was never set loads as None."""
        assert KeyValueConfigBackend({}).load(USERNAME_KEY) is None

    def test_unparseable_value_loads_none(self):
        """Text that is not JSON loads as None."""
        assert KeyValueConfigBackend({USERNAME_KEY: 'abc123'}).load(USERNAME_KEY) is None


class TestConfigStore:
    """Tests for the ConfigStore facade."""

    def test_delegates_to_backend(self):
        """load and save go through the injected backend."""
        store = ConfigStore(KeyValueConfigBackend())
        store.save(BRIDGE_IP_KEY, '10.0.0.2')
        assert store.load(BRIDGE_IP_KEY) == '10.0.0.2'

    def test_bridge_config_defaults(self):
        """Unset values are reported as empty strings."""
        store = ConfigStore(KeyValueConfigBackend())
        assert store.bridge_config() == {'hue_bridge_ip': '', 'username': ''}

    def test_bridge_config(self, store):
        """bridge_config returns the stored IP and username."""
        assert store.bridge_config() == {'hue_bridge_ip': '10.0.0.2', 'username': 'abc123'}

    def test_file_store(self, tmp_path):
        """file_store builds a store over a FileConfigBackend."""
        store = file_store(tmp_path / 'config.json')
        assert isinstance(store.backend, FileConfigBackend)
        assert store.backend.path == tmp_path / 'config.json'

    def test_base_backend_is_abstract(self):
        """The ConfigBackend interface has no storage of its own."""
        with pytest.raises(NotImplementedError):
            ConfigBackend().load(USERNAME_KEY)
