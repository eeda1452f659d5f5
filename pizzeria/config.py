"""Runtime configuration defaults for the backend connection and debug log."""

from __future__ import annotations

import os

DEFAULT_BACKEND_URL = "http://localhost:8000"
DEFAULT_DEBUG_LOG_PATH = "/tmp/pizzeria-debug.log"

_BACKEND_URL_ENV = "PIZZERIA_BACKEND_URL"
_SEED_IF_EMPTY_ENV = "PIZZERIA_SEED_IF_EMPTY"
_DEBUG_LOG_ENV = "PIZZERIA_DEBUG_LOG"

_FALSE_VALUES = {"0", "false", "no", "off"}


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw not in _FALSE_VALUES


BACKEND_URL = os.environ.get(_BACKEND_URL_ENV, "").strip() or DEFAULT_BACKEND_URL
SEED_IF_EMPTY = env_flag(_SEED_IF_EMPTY_ENV, True)
DEBUG_LOG_PATH = os.environ.get(_DEBUG_LOG_ENV, "").strip() or DEFAULT_DEBUG_LOG_PATH
