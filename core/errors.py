"""Exception types raised by the Hue bridge client."""


class HueError(Exception):
    """Base class for all errors raised by this package."""


class ValidationError(HueError):
    """Response body did not have the expected shape."""


class BridgeError(HueError):
    """The bridge answered with one or more error entries.

    Attributes:
        errors: The raw ``error`` dicts from the response, in order
    """

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message)
        self.errors = errors or []


class NotConfiguredError(HueError):
    """A required config value (bridge IP or username) has not been stored."""
