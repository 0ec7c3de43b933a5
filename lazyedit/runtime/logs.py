"""File-backed logging setup.

The terminal is in raw mode while the editor runs, so log records go to a
rotating file under the platform log directory and never to stderr.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FILENAME = "lazyedit.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
MAX_LOG_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3


def default_log_path() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def configure_logging(level: str = "WARNING", log_path: Path | None = None) -> logging.Handler:
    """Attach one handler to the ``lazyedit`` logger and return it.

    Falls back to a ``NullHandler`` when the log file cannot be opened.
    """
    package_logger = logging.getLogger("lazyedit")
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
        existing.close()

    target = log_path if log_path is not None else default_log_path()
    handler: logging.Handler
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            target,
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    except OSError:
        handler = logging.NullHandler()

    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return handler
