"""Logging configuration for the dirhop entrypoint.

The terminal is in raw mode while browsing, so records go to a rotating log
file instead of stderr. Setting up the file must never break the program.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "dirhop"
DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / "dirhop.log"
DEFAULT_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_BYTES = 512 * 1024
BACKUP_COUNT = 2

_HANDLER_TAG_ATTR = "_dirhop_handler"

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def parse_level(level: str | None) -> int:
    if not level:
        return _LEVEL_MAP[DEFAULT_LEVEL]
    return _LEVEL_MAP.get(str(level).strip().upper(), _LEVEL_MAP[DEFAULT_LEVEL])


def _remove_our_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG_ATTR, False):
            logger.removeHandler(handler)
            handler.close()


def configure_logging(level: str | None = None, log_path: Path | None = None) -> Path | None:
    """Attach a rotating file handler to the ``dirhop`` logger.

    Idempotent: handlers from earlier calls are replaced. Returns the log file
    path, or ``None`` when the file could not be opened.
    """
    logger = logging.getLogger(APP_NAME)
    _remove_our_handlers(logger)
    logger.setLevel(parse_level(level))
    logger.propagate = False

    target = log_path if log_path is not None else DEFAULT_LOG_PATH
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            target,
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError:
        null_handler = logging.NullHandler()
        setattr(null_handler, _HANDLER_TAG_ATTR, True)
        logger.addHandler(null_handler)
        return None

    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    setattr(handler, _HANDLER_TAG_ATTR, True)
    logger.addHandler(handler)
    return target
