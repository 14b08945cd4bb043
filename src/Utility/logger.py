from __future__ import annotations

import logging
import os
import sys
import traceback

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str, log_file: str | None = None, level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # re-running setup must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def log_exception(logger: logging.Logger, exc_info=None, message: str = "An exception occurred") -> None:
    if exc_info is None:
        exc_info = sys.exc_info()

    exc_type, exc_value, exc_tb = exc_info
    tb_details = traceback.extract_tb(exc_tb)

    if tb_details:
        frame = tb_details[-1]
        logger.error(
            "%s: %s in %s:%d (function: %s): %s",
            message,
            exc_type.__name__,
            os.path.basename(frame.filename),
            frame.lineno,
            frame.name,
            exc_value,
        )
        logger.debug("Full traceback:\n%s", "".join(traceback.format_exception(exc_type, exc_value, exc_tb)))
    else:
        logger.error("%s: %s: %s", message, exc_type.__name__, exc_value)


LOGGER_NAMES = ("apps", "src")


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> None:
    for name in LOGGER_NAMES:
        setup_logger(name, log_file, level)
