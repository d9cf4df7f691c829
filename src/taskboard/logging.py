"""Log setup for the task board CLI and server.

Everything under the ``taskboard`` logger goes to ``<log_dir>/taskboard.log``,
rotated at 10MB. The CLI adds a console handler when asked to be verbose.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from taskboard.config import BoardConfig

LOG_FILE = "taskboard.log"
MAX_BYTES = 10 * 1024 * 1024
BACKUP_COUNT = 5

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config: BoardConfig, *, console: bool = False) -> logging.Logger:
    """Attach handlers to the ``taskboard`` logger.

    Handlers from an earlier call are closed and replaced, so running the
    setup again (tests, reloads) never duplicates lines.

    Args:
        config: Supplies ``log_dir`` and ``log_level``. Unset values fall
            back to ``logs/`` and INFO.
        console: Also echo records to stderr.

    Returns:
        The configured ``taskboard`` logger.
    """
    log_dir = Path(config.log_dir or "logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    level = (config.log_level or "INFO").upper()

    logger = logging.getLogger("taskboard")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            log_dir / LOG_FILE, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8"
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging to %s at %s", log_dir / LOG_FILE, level)
    return logger


def clip(text: str, limit: int = 500) -> str:
    """Shorten a response body before it goes into an error or log line."""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... [{len(text) - limit} more chars]"
