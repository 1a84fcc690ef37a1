"""Logging setup for the goatherd CLI."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: int | str = logging.INFO, log_file: str | None = None) -> None:
    """Send goatherd.* log records to stdout, and to log_file when given.

    Calling it again replaces the previous handlers.
    """
    logger = logging.getLogger("goatherd")
    logger.setLevel(level)
    logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging at %s", logging.getLevelName(logger.level))
