"""Configuration persistence for the bridge client.

This module handles:
- Immutable client settings (file name, device type, discovery URL)
- The ConfigBackend interface and its file and key-value implementations
- ConfigStore, the load/save facade used by the client and the CLI
"""

from collections.abc import MutableMapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.codec import serialize_json, deserialize_json
from models.types import BridgeConfig

# Configuration file (relative to the working directory, like the original tool)
CONFIG_FILE = Path('.hue-scene-mgr.json')

# Config keys
BRIDGE_IP_KEY = 'hue-bridge-ip'
USERNAME_KEY = 'username'

DEFAULT_DEVICE_TYPE = 'hue-scene-mgr'
DEFAULT_BRIDGE_IP = '192.168.86.245'
DISCOVERY_URL = 'https://discovery.meethue.com/'


@dataclass(frozen=True)
class ClientSettings:
    """Immutable settings passed to HueBridgeClient at construction."""
    config_file: Path = CONFIG_FILE
    device_type: str = DEFAULT_DEVICE_TYPE
    discovery_url: str = DISCOVERY_URL
    default_bridge_ip: str = DEFAULT_BRIDGE_IP
    timeout: float | None = None


class ConfigBackend:
    """Interface for a persisted key-value config map."""

    def load(self, key: str) -> Any:
        raise NotImplementedError

    def save(self, key: str, value: Any) -> None:
        raise NotImplementedError


class FileConfigBackend(ConfigBackend):
    """Stores the whole config as one pretty-printed JSON file.

    The file is read and rewritten in full on every save, without locking.
    A missing or unparseable file is treated as an empty config and is
    overwritten by the next save.
    """

    def __init__(self, path: Path | str = CONFIG_FILE):
        self.path = Path(path)

    def read_all(self) -> dict:
        """Read the whole config mapping from disk."""
        if not self.path.exists():
            return {}
        with open(self.path, 'r', encoding='utf-8') as f:
            data = deserialize_json(f.read(), {})
        return data if isinstance(data, dict) else {}

    def load(self, key: str) -> Any:
        return self.read_all().get(key)

    def save(self, key: str, value: Any) -> None:
        config = self.read_all()
        config[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(serialize_json(config))


class KeyValueConfigBackend(ConfigBackend):
    """Stores each value as JSON text under its own key in a string mapping.

    This mirrors browser local storage: any ``MutableMapping[str, str]`` can
    be used, e.g. a plain dict or a shelve-like object.
    """

    def __init__(self, storage: MutableMapping[str, str] | None = None):
        self.storage = storage if storage is not None else {}

    def load(self, key: str) -> Any:
        return deserialize_json(self.storage.get(key))

    def save(self, key: str, value: Any) -> None:
        self.storage[key] = serialize_json(value)


class ConfigStore:
    """Load and save named config values through a ConfigBackend."""

    def __init__(self, backend: ConfigBackend):
        self.backend = backend

    def load(self, key: str) -> Any:
        """Return the value stored at key, or None if it was never set."""
        return self.backend.load(key)

    def save(self, key: str, value: Any) -> None:
        """Replace the value stored at key."""
        self.backend.save(key, value)

    def bridge_config(self) -> BridgeConfig:
        """Return the stored bridge IP and username (empty strings if unset)."""
        return {
            'hue_bridge_ip': self.load(BRIDGE_IP_KEY) or '',
            'username': self.load(USERNAME_KEY) or '',
        }


def file_store(path: Path | str = CONFIG_FILE) -> ConfigStore:
    """Create a ConfigStore backed by a JSON file."""
    return ConfigStore(FileConfigBackend(path))
