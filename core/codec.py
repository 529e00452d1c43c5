"""JSON helpers shared by the config store and the bridge client."""

import json
from typing import Any


def serialize_json(data: Any) -> str:
    """Serialise data as JSON indented by two spaces."""
    return json.dumps(data, indent=2)


def deserialize_json(text: str | bytes | None, fallback: Any = None) -> Any:
    """Parse JSON text, returning ``fallback`` instead of raising on bad input.

    Args:
        text: JSON document to parse
        fallback: Value returned when ``text`` is not valid JSON

    Returns:
        Decoded value, or ``fallback``
    """
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        return fallback
