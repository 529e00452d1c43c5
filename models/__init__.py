"""Data models and utility functions.

This package contains:
- types: TypedDict shapes for bridge config and discovery results
- filters: Distinct-value and multi-field filtering of resource collections
- utils: CLI helpers (client construction, error reporting, fuzzy matching)
"""
