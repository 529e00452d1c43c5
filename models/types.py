"""Type definitions for Hue Scene Manager.

TypedDict shapes for the small amount of structured data the client
interprets. Lights, groups and scenes are owned by the bridge and are kept
as plain dicts.
"""

from typing import TypedDict


class BridgeConfig(TypedDict):
    """Stored bridge address and API username."""
    hue_bridge_ip: str
    username: str


class BridgeDescriptor(TypedDict, total=False):
    """Bridge information from the discovery service."""
    id: str
    internalipaddress: str
    port: int
