"""
core/logging/logic/log_setup.py
===============================

One-time configuration of the standard library root logger.

• Console handler always, file handler when a path is configured.
• Safe to call repeatedly: handlers are installed only once per process.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

_configured = False
_installed: list[logging.Handler] = []
_lock = threading.Lock()


def configure_logging(level: str = "INFO", file: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger.

    Args:
        level: level name, e.g. "DEBUG" or "INFO"; unknown names fall back to INFO
        file: optional log file path; parent directories are created

    Returns:
        The root logger.
    """
    global _configured
    root = logging.getLogger()
    with _lock:
        if _configured:
            return root

        formatter = logging.Formatter(LOG_FORMAT)
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        root.addHandler(console)
        _installed.append(console)

        if file:
            path = Path(file).expanduser()
            os.makedirs(path.parent, exist_ok=True)
            file_handler = logging.FileHandler(path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
            _installed.append(file_handler)

        resolved = logging.getLevelName(str(level).upper())
        root.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
        _configured = True
    return root


def reset_logging() -> None:
    """Remove the handlers installed by configure_logging (tests)."""
    global _configured
    root = logging.getLogger()
    with _lock:
        while _installed:
            handler = _installed.pop()
            root.removeHandler(handler)
            handler.close()
        _configured = False
