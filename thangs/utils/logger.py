"""Shared logger initialization for the CLI.

Usage:
    from thangs.utils.logger import get_logger
    log = get_logger(__name__)
    log.debug("message")

Log output goes to stderr so it never mixes with ``--json`` output.
"""
from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import get_config

_FORMAT = "%(message)s"  # rich handler already adds time & level
_HANDLER_NAME = "thangs"


def _level_from_env() -> int:
    name = (get_config("THANGS_LOG_LEVEL", "WARNING") or "WARNING").upper()
    return getattr(logging, name, logging.WARNING)


def configure_logging(level: Optional[int] = None) -> None:
    """Idempotently attach a RichHandler to the package logger."""
    logger = logging.getLogger(_HANDLER_NAME)
    if any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        if level is not None:
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)
        return
    level = _level_from_env() if level is None else level
    logger.setLevel(level)
    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, markup=False)
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)


def get_logger(name: str = __name__, level: Optional[int] = None) -> logging.Logger:
    """Return a module-level logger (configuring the package logger on first call)."""
    configure_logging()
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
