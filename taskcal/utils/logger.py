"""Shared logger initialization for the CLI.

Usage:
    from taskcal.utils.logger import get_logger
    log = get_logger(__name__)
    log.info("message")

Library modules under calendar_api/ and integrations/ use plain
logging.getLogger and never configure handlers themselves.
"""
from __future__ import annotations

import logging
from typing import Optional, Union

from rich.logging import RichHandler

_FORMAT = "%(message)s"  # rich handler already adds time & level


def _has_rich_handler(logger: logging.Logger) -> bool:
    return any(isinstance(h, RichHandler) for h in logger.handlers)


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Idempotently configure the root logger with a rich handler."""
    root = logging.getLogger()
    root.setLevel(level)
    if _has_rich_handler(root):
        return
    handler = RichHandler(rich_tracebacks=True, markup=False, show_path=False)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)


def get_logger(name: str = __name__, level: Optional[int] = None) -> logging.Logger:
    """Return a module-level logger (configuring root on first call)."""
    if not _has_rich_handler(logging.getLogger()):
        configure_logging()
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
