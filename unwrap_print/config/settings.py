#!/usr/bin/env python3
"""
Process-wide settings resolved once at import time.

``TRACK_CALLER`` mirrors a build-time feature switch: it is read from
``UNWRAP_PRINT_TRACK_CALLER`` when the package is first imported and stays
fixed for the life of the process. Nothing here writes to the environment.
"""

from __future__ import annotations

import os

TRACK_CALLER_ENV = "UNWRAP_PRINT_TRACK_CALLER"


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean environment variable."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_track_caller() -> bool:
    """Read the call-site capture switch from the environment."""
    return env_bool(TRACK_CALLER_ENV, False)


TRACK_CALLER: bool = load_track_caller()
