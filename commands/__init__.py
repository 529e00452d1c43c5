"""CLI command modules.

This package contains:
- setup: Bridge discovery, configuration and pairing commands
- inspection: Listing commands for lights, groups and scenes
- scene_state: Per-light scene state commands
"""
