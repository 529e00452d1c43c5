"""Utility functions for the Hue Scene Manager CLI.

This module contains helper functions used by the command modules:
- get_client: Build a HueBridgeClient from the CLI context settings
- hue_errors: Turn client errors into CLI error messages
- parse_filters: Parse ``key=value`` filter options
- similarity_score: Fuzzy string matching for command suggestions
"""

import functools

import click
import requests

from core.client import HueBridgeClient
from core.config import ClientSettings, file_store
from core.errors import HueError


def get_client() -> HueBridgeClient:
    """Create a client from the settings stored on the current click context."""
    ctx = click.get_current_context()
    settings = ctx.find_object(ClientSettings) or ClientSettings()
    return HueBridgeClient(file_store(settings.config_file), settings)


def hue_errors(func):
    """Report HueError and transport failures as click errors (exit status 1)."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except HueError as e:
            raise click.ClickException(str(e))
        except requests.exceptions.RequestException as e:
            raise click.ClickException(f"Could not reach the bridge: {e}")
    return wrapper


def parse_filters(values: tuple[str, ...]) -> dict[str, str]:
    """Parse ``key=value`` strings into a filter mapping.

    Raises:
        click.BadParameter: If a value has no ``=``
    """
    filters = {}
    for value in values:
        key, sep, expected = value.partition('=')
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got '{value}'", param_hint='--filter')
        filters[key] = expected
    return filters


def similarity_score(s1: str, s2: str) -> int:
    """Calculate similarity score between two strings.

    Args:
        s1: First string to compare
        s2: Second string to compare

    Returns:
        Similarity score:
        - 100: Exact match (case-insensitive)
        - 80: Prefix match
        - 60: Substring match
        - 0-50: Character sequence match (proportional to matching characters)
        - 0: No match
    """
    s1_lower = s1.lower()
    s2_lower = s2.lower()

    if s1_lower == s2_lower:
        return 100

    if s2_lower.startswith(s1_lower) or s1_lower.startswith(s2_lower):
        return 80

    if s1_lower in s2_lower or s2_lower in s1_lower:
        return 60

    # Characters of s1 found in order in s2
    matches = 0
    j = 0
    for char in s1_lower:
        while j < len(s2_lower):
            if s2_lower[j] == char:
                matches += 1
                j += 1
                break
            j += 1

    if matches > 0:
        score = int((matches / max(len(s1_lower), len(s2_lower))) * 50)
        return score if score > 20 else 0

    return 0
