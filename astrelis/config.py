"""Process-wide engine settings and the engine version."""

from __future__ import annotations

import os

VERSION_TYPE = "Alpha"
VERSION_MAJOR = 0
VERSION_MINOR = 0
VERSION_PATCH = 1

_debug_mode = os.environ.get("ASTRELIS_DEBUG", "").lower() in ("1", "true", "yes", "on")


def is_debug_mode() -> bool:
    """Whether debug behaviour (stricter checks, verbose logging) is on."""
    return _debug_mode


def set_debug_mode(enabled: bool) -> None:
    global _debug_mode
    _debug_mode = bool(enabled)


def version_string() -> str:
    """The engine version, such as "Alpha 0.0.1"."""
    return f"{VERSION_TYPE} {VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"