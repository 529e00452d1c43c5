"""HueBridgeClient class for the Hue Bridge local REST API (v1).

Every call is a single request: the raw response is decoded with the JSON
codec and routed through check_response() before it is returned. Bridge
address and username are looked up in the ConfigStore on every call.
"""

import json
from typing import Any

import requests

from core.codec import deserialize_json
from core.config import ClientSettings, ConfigStore, BRIDGE_IP_KEY, USERNAME_KEY
from core.errors import NotConfiguredError, ValidationError
from core.validation import check_response
from models.types import BridgeDescriptor


class HueBridgeClient:
    """Reads and writes lights, groups and scenes on a Hue Bridge."""

    def __init__(self, store: ConfigStore, settings: ClientSettings | None = None,
                 session: requests.Session | None = None):
        """Initialise HueBridgeClient.

        Args:
            store: Config store holding the bridge IP and username
            settings: Immutable client settings (defaults used if omitted)
            session: HTTP session to use (a new one is created if omitted)
        """
        self.store = store
        self.settings = settings or ClientSettings()
        self.session = session or requests.Session()

    @property
    def bridge_host(self) -> str:
        """Base URL of the bridge, e.g. ``http://192.168.1.2``."""
        bridge_ip = self.store.load(BRIDGE_IP_KEY) or self.settings.default_bridge_ip
        return f"http://{bridge_ip}"

    def _username(self) -> str:
        username = self.store.load(USERNAME_KEY)
        if not username:
            raise NotConfiguredError("No username stored. Run 'pair' to register with the bridge.")
        return username

    def _resource_url(self, *parts: str) -> str:
        return '/'.join([self.bridge_host, 'api', self._username(), *parts])

    def _request(self, method: str, url: str, body: str | None = None) -> Any:
        """Send a request and decode its JSON body (None if it is not JSON)."""
        response = self.session.request(method, url, data=body, timeout=self.settings.timeout)
        return deserialize_json(response.text)

    def use_bridge(self, bridge_ip: str):
        """Store the IP address of the bridge to talk to."""
        self.store.save(BRIDGE_IP_KEY, bridge_ip)

    def discover_bridges(self) -> list[BridgeDescriptor]:
        """Ask the Philips discovery service for bridges on the local network."""
        body = self._request('GET', self.settings.discovery_url)
        return check_response(body, expect_array=True)

    def create_user(self, device_type: str | None = None) -> str:
        """Create a new user on the bridge and return its username.

        The link button on the bridge must be pressed shortly before calling
        this, otherwise the bridge answers with a "link button not pressed"
        error.

        Args:
            device_type: Application identifier (defaults to settings.device_type)

        Returns:
            The new API username
        """
        payload = {'devicetype': device_type or self.settings.device_type}
        body = self._request('POST', f"{self.bridge_host}/api", json.dumps(payload))
        check_response(body, expect_array=True)

        try:
            return body[0]['success']['username']
        except (IndexError, KeyError, TypeError):
            raise ValidationError(f"Response did not contain a username: {body!r}")

    def register(self, device_type: str | None = None) -> str:
        """Create a new user and save its username in the config store."""
        username = self.create_user(device_type)
        self.store.save(USERNAME_KEY, username)
        return username

    def _get_resource(self, resource: str, resource_id: str | None = None) -> dict:
        # Both the collection and a single item are JSON objects
        url = self._resource_url(resource, resource_id or '')
        return check_response(self._request('GET', url), expect_object=True)

    def get_lights(self, light_id: str | None = None) -> dict:
        """Get all lights keyed by ID, or a single light if light_id is given."""
        return self._get_resource('lights', light_id)

    def get_groups(self, group_id: str | None = None) -> dict:
        """Get all groups keyed by ID, or a single group if group_id is given."""
        return self._get_resource('groups', group_id)

    def get_scenes(self, scene_id: str | None = None) -> dict:
        """Get all scenes keyed by ID, or a single scene if scene_id is given."""
        return self._get_resource('scenes', scene_id)

    def get_light_state(self, scene_id: str, light_id: str) -> dict | None:
        """Get the state a scene stores for one light.

        Returns:
            The light state dict, or None if the scene has no state for the light
        """
        scene = check_response(self._request('GET', self._resource_url('scenes', scene_id, '')))
        if not isinstance(scene, dict):
            raise ValidationError(f"Scene {scene_id} response was not an object: {scene!r}")
        return scene.get('lightstates', {}).get(light_id)

    def set_light_state(self, scene_id: str, light_id: str, light_state: dict | str) -> Any:
        """Replace the state a scene stores for one light.

        Args:
            scene_id: Scene ID
            light_id: Light ID within the scene
            light_state: State dict, or a JSON string sent as is

        Returns:
            The decoded bridge response (a list of success entries)
        """
        body = light_state if isinstance(light_state, str) else json.dumps(light_state)
        url = self._resource_url('scenes', scene_id, 'lightstates', light_id)
        return check_response(self._request('PUT', url, body))