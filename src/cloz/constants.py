"""
Shared constants for cloz.

This module provides a single source of truth for the property names
that composition treats specially.
"""

# Lifecycle hook names
DEFAULT_MARKER_NAME = "_cloz"
"""Completion marker key, requested with gain() when an object is composed.

If an ancestor stores a method under this key, it runs for every object
derived from it. An initializer that declares the key runs its own instead.
"""

DEFAULT_INIT_HOOK_NAME = "__cloz"
"""One-shot init hook key, invoked only when the initializer declares it."""

ENV_PREFIX = "CLOZ_"
"""Environment variable prefix for settings."""
