"""Core functionality for Hue Scene Manager.

This package contains:
- client: HueBridgeClient class for API interaction
- config: Client settings and config store backends
- codec: JSON serialisation helpers
- validation: Response shape and error envelope checks
- errors: Exception types
"""
