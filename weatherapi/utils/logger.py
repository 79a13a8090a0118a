import logging
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

from weatherapi.config import get_settings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Optional[str]) -> int:
    name = (level or get_settings().log_level).upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {name}")
    return resolved


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Set up a logger with JSON formatting for structured logging.

    Provider and transport modules call this once at import time. Repeated
    calls for the same name return the already configured logger.

    Args:
        name: The name of the logger (usually __name__)
        level: Optional level name overriding settings.log_level

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    log_level = _resolve_level(level)
    logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(
        jsonlogger.JsonFormatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    )

    logger.addHandler(handler)
    logger.propagate = False

    return logger
