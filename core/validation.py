"""Validation of decoded Hue bridge responses.

The v1 API reports failures inside a 200 response as a list of
``{"error": {...}}`` entries, so every response is routed through
check_response() before it reaches the caller.
"""

from typing import Any

import click

from core.errors import BridgeError, ValidationError


def check_response(body: Any, expect_array: bool = False, expect_object: bool = False) -> Any:
    """Check a decoded response body for bridge-reported errors and shape.

    Error entries are checked first: the bridge answers with an error list
    whatever shape the request would normally return.

    Args:
        body: Decoded JSON response body
        expect_array: Require the body to be a list
        expect_object: Require the body to be a dict

    Returns:
        The body, unchanged

    Raises:
        BridgeError: If the body is a list containing at least one error entry
        ValidationError: If the body does not have the expected shape
    """
    if isinstance(body, list):
        errors = [entry['error'] for entry in body
                  if isinstance(entry, dict) and entry.get('error')]
        if errors:
            click.echo(f"At least one error occurred: {body!r}", err=True)
            details = ''.join(f"\n - {_describe(error)}" for error in errors)
            raise BridgeError(f"At least one error occurred:{details}", errors)

    if expect_array and not isinstance(body, list):
        click.echo(f"Response unexpectedly was not an array: {body!r}", err=True)
        raise ValidationError("Response unexpectedly was not an array!")

    if expect_object and not isinstance(body, dict):
        click.echo(f"Response unexpectedly was not an object: {body!r}", err=True)
        raise ValidationError("Response unexpectedly was not an object!")

    return body


def _describe(error: Any) -> str:
    """Return the description of a single error entry."""
    if isinstance(error, dict):
        return str(error.get('description', 'Unknown error'))
    return str(error)
