"""Logging sinks for the adapter process.

Standard output carries the protocol, so logs always go to standard error.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "WARNING", log_file: str | None = None) -> logging.Logger:
    """Attach a stderr rich handler (and optionally a file handler) to the package logger."""
    logger = logging.getLogger("gtp_adapter")
    logger.setLevel(level.upper())
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = False

    logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True))
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)
    return logger
