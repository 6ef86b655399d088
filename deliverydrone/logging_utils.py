"""Mini README: Application-wide logging helpers for the delivery planner.

Structure:
    * configure_root_logger - install the shared stream handler once.
    * get_logger - factory returning module loggers with baseline setup.

Usage:
    Every module creates ``LOGGER = get_logger(__name__)`` at import time.
    Planning runs log route decisions at DEBUG, skipped orders at INFO and
    the end-of-day statistics at INFO. The handler is only attached once so
    repeated imports (tests, uvicorn reloads) do not duplicate output.
"""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER_INITIALISED = False
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"


def configure_root_logger(level: int = logging.INFO) -> None:
    """Configure the root logger with the planner's formatter."""

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def set_level(level: int) -> None:
    """Adjust the root level after configuration, e.g. for ``--verbose`` runs."""

    configure_root_logger()
    logging.getLogger().setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
