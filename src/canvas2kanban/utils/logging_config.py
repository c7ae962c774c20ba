"""Logging setup shared by the CLI and the server."""

from __future__ import annotations

import logging

from canvas2kanban.config import CANVAS2KANBAN_LOG_LEVEL

_PACKAGE_LOGGERS = ("canvas2kanban", "server")
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_NAME = "canvas2kanban"


def get_logger(name: str) -> logging.Logger:
    """Get or create a logger with the given name."""
    return logging.getLogger(name)


def configure_logging(level: str | int | None = None) -> None:
    """Attach one stream handler to each package logger.

    Calling this more than once only updates the level, so the CLI and the
    server can both call it at startup.

    Args:
        level: Level name or number. Defaults to ``CANVAS2KANBAN_LOG_LEVEL``.
    """
    resolved = level if level is not None else CANVAS2KANBAN_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = resolved.upper()

    for name in _PACKAGE_LOGGERS:
        package_logger = logging.getLogger(name)
        package_logger.setLevel(resolved)
        if any(handler.get_name() == _HANDLER_NAME for handler in package_logger.handlers):
            continue
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler.set_name(_HANDLER_NAME)
        package_logger.addHandler(handler)
