"""Engine logging: a console and file logger named ``LUTH``."""

from __future__ import annotations

import logging
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOGGER_NAME = "LUTH"
_PATTERN = "[%(asctime)s] %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"
_RESET = "\x1b[0m"


class _ColorFormatter(logging.Formatter):
    _COLORS = {
        TRACE: "\x1b[37m",
        logging.DEBUG: "\x1b[36m",
        logging.INFO: "\x1b[32m",
        logging.WARNING: "\x1b[33m\x1b[1m",
        logging.ERROR: "\x1b[31m\x1b[1m",
        logging.CRITICAL: "\x1b[1m\x1b[41m",
    }

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = self._COLORS.get(record.levelno)
        return f"{color}{text}{_RESET}" if color else text


def _is_terminal(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        return False


def init_logging(log_file="Luth.log") -> logging.Logger:
    """Configure the engine logger for stdout and a truncated log file.

    Calling it again replaces the previous handlers. Pass ``None`` to skip
    the file.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stdout)
    formatter_type = _ColorFormatter if _is_terminal(sys.stdout) else logging.Formatter
    console.setFormatter(formatter_type(_PATTERN, _DATE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_PATTERN, _DATE_FORMAT))
        logger.addHandler(file_handler)

    logger.setLevel(TRACE)
    logger.propagate = False
    return logger


def get_logger() -> logging.Logger:
    """Return the engine logger."""
    return logging.getLogger(LOGGER_NAME)