from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from fav_core.config import FavConfig
from fav_core.home import FavPaths

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILENAME = "fav.log"


def configure_logging(paths: FavPaths, config: FavConfig, *, verbose: bool = False) -> logging.Logger:
    """Attach handlers to the `fav_core` logger.

    stdout carries command output, so the console handler writes to stderr.
    Calling this again replaces the handlers instead of stacking them.
    """

    logger = logging.getLogger("fav_core")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    level = logging.DEBUG if verbose else logging.getLevelName(config.logging.level)
    logger.setLevel(level)
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if config.logging.to_file:
        paths.logs_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            paths.logs_dir / LOG_FILENAME,
            maxBytes=config.logging.max_size_mb * 1024 * 1024,
            backupCount=config.logging.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
