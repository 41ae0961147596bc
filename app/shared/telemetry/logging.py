"""Logging configuration for the application."""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler

from app.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout and, when settings.log_file is set, to a file
    rotated daily with a week of history.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings.log_file:
        handlers.append(
            TimedRotatingFileHandler(
                settings.log_file, when="midnight", backupCount=7, encoding="utf-8"
            )
        )
    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=handlers)
