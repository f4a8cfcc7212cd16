"""Log file setup.

The dashboard owns the terminal, so log records go to a file: ``--log-file``
when given, otherwise ``wing.log`` under the platform log directory.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FILENAME = "wing.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
MAX_LOG_BYTES = 1_000_000
LOG_BACKUPS = 2


def default_log_path() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def parse_log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {name}")
    return level


def configure_logging(level: str = DEFAULT_LOG_LEVEL, log_file: Path | None = None) -> Path | None:
    """Attach a rotating file handler to the ``wing`` logger.

    Returns the log path, or ``None`` when the file cannot be opened; logging
    is then left unconfigured rather than aborting startup.
    """
    path = log_file if log_file is not None else default_log_path()
    package_logger = logging.getLogger("wing")
    package_logger.setLevel(parse_log_level(level))
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8")
    except OSError:
        package_logger.addHandler(logging.NullHandler())
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = False
    return path


__all__ = ["DEFAULT_LOG_LEVEL", "configure_logging", "default_log_path", "parse_log_level"]
