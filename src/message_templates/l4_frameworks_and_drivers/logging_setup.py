"""File logging for the ``mtpl`` logger tree (engine, library, repo)."""

from __future__ import annotations

import logging
from pathlib import Path

LOGGER_NAME = 'mtpl'
LOG_FILENAME = 'mtpl_debug.log'
LOG_FORMAT = '%(asctime)s %(levelname)-7s [%(name)s] %(message)s'


def _existing_handler(logger: logging.Logger, log_path: Path) -> logging.FileHandler | None:
    target = str(log_path.resolve())
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == target:
            return handler
    return None


def setup_file_logging(log_dir: Path, level: int = logging.DEBUG) -> Path:
    """Send ``mtpl.*`` records at *level* and above to a file in *log_dir*.

    Calling again with the same directory only adjusts the level; no second
    handler is attached. Returns the log file path.
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILENAME
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if _existing_handler(logger, log_path) is None:
        handler = logging.FileHandler(log_path, encoding='utf-8')
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.info('Logging %s records to %s', logging.getLevelName(level), log_path)
    return log_path
