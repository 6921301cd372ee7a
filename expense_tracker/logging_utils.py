"""Mini README: Application-wide logging helpers for the expense tracker.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - optional helper to adjust the global logging level.

Usage:
    Modules import ``get_logger`` to create contextual loggers that include
    module names and debugging friendly formatting. Configuration happens
    exactly once per process so repeated imports never stack handlers; a later
    call with an explicit level only adjusts the root level.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def _resolve_level(level: Union[int, str]) -> int:
    """Translate level names such as ``"debug"`` into numeric levels."""

    if isinstance(level, int):
        return level
    numeric = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown logging level: {level}")
    return numeric


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger with a debugging friendly formatter."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        root_logger.setLevel(_resolve_level(level))
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(_resolve_level(level))
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
