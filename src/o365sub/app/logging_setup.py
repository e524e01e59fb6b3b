from __future__ import annotations

import logging
import pathlib
import time

LOGGER_NAME = "o365sub"
LOG_FORMAT = "%(asctime)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def log_file_name(now: float | None = None) -> str:
    stamp = time.strftime("%Y%m%d_%H%M%S", time.localtime(now))
    return f"check_o365_subscription_{stamp}.log"


def setup_logging(enabled: bool, directory: str | pathlib.Path = ".") -> pathlib.Path | None:
    """Append-only run log when enabled; otherwise the logger goes nowhere."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    if not enabled:
        logger.addHandler(logging.NullHandler())
        return None

    path = pathlib.Path(directory) / log_file_name()
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    return path
