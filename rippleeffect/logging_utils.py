"""Mini README: Application-wide logging helpers for Ripple Effect.

Structure:
    * get_logger - module logger factory that guarantees a root handler.
    * configure_root_logger - installs the shared handler once and applies levels.

Usage:
    Every module declares ``LOGGER = get_logger(__name__)`` at import time,
    which installs the handler at INFO. Entry points (the CLI, the web
    factory) call ``configure_root_logger`` with the configured level later
    on; the level is applied to the root logger while the handler is only
    ever added once, so reloads never stack duplicate handlers.
"""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER_INITIALISED = False
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def configure_root_logger(level: Optional[int | str] = None) -> None:
    """Attach the shared stream handler once and apply ``level`` when given."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()

    if not _LOGGER_INITIALISED:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(handler)
        root_logger.setLevel(logging.INFO)
        _LOGGER_INITIALISED = True

    if level is not None:
        root_logger.setLevel(_resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
