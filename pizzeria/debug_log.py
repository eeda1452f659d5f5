"""File-backed debug logging.

The terminal belongs to the Textual app, so log records go to a file only.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pizzeria.config import DEBUG_LOG_PATH

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_debug_log(path: str | Path = DEBUG_LOG_PATH, level: int = logging.DEBUG) -> Path | None:
    """Attach a file handler to the ``pizzeria`` logger and return its path.

    Returns None when the log file cannot be opened; the app keeps running.
    """
    log_path = Path(path)
    logger = logging.getLogger("pizzeria")
    logger.setLevel(level)
    logger.propagate = False

    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(log_path):
            return log_path

    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError:
        logger.addHandler(logging.NullHandler())
        return None

    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    return log_path
