"""Filtering helpers for bridge resource collections.

Collections come back from the bridge as ``{id: record}`` dicts. Both helpers
flatten them into a list of ``{'id': id, **record}`` dicts first, preserving
the collection's order.
"""

from typing import Any

# Filter value that matches every entry
ALL = 'ALL'


def flatten_entries(entries: dict[str, dict]) -> list[dict]:
    """Turn an ``{id: record}`` mapping into a list of records carrying their id."""
    return [{'id': entry_id, **entry} for entry_id, entry in entries.items()]


def get_filter_values(entries: dict[str, dict], filter_key: str) -> list[dict]:
    """Return the first entry for each distinct value of ``filter_key``.

    Useful for building the options of a filter dropdown: one entry per
    distinct room, type, class, etc.

    Args:
        entries: Mapping of resource ID to record
        filter_key: Record field to de-duplicate on (missing fields count as None)

    Returns:
        List of flattened entries, first occurrence of each value, in order
    """
    seen = []
    result = []
    for entry in flatten_entries(entries):
        value = entry.get(filter_key)
        if any(same_value(value, other) for other in seen):
            continue
        seen.append(value)
        result.append(entry)
    return result


def same_value(a: Any, b: Any) -> bool:
    """Compare two field values without mixing types (True is not 1, 1 is not 1.0)."""
    return type(a) is type(b) and a == b


def _as_list(value: Any) -> list:
    if isinstance(value, list):
        return value
    return [value]


def filter_entries(entries: dict[str, dict], filters: dict[str, Any]) -> list[dict]:
    """Return the entries matching every filter.

    An entry matches a ``(key, expected)`` pair when its value at ``key``
    equals ``expected`` or, for list values, contains it. Values of different
    types never match. The value ``'ALL'`` matches any entry.

    Args:
        entries: Mapping of resource ID to record
        filters: Mapping of record field to expected value

    Returns:
        List of flattened entries that match, in order
    """
    return [
        entry for entry in flatten_entries(entries)
        if all(any(same_value(expected, value) for value in [ALL] + _as_list(entry.get(key)))
               for key, expected in filters.items())
    ]
