"""
Logging for the tictactoe package.

Everything logs under the "tictactoe" logger. Nothing is configured on
import; a host that wants the engine's messages calls setup_logging().
"""

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "tictactoe"
DEFAULT_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Calling it again replaces the previous handler instead of stacking another.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        format_string: Record format (DEFAULT_FORMAT if None)
        stream: Where records go (stdout if None)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))

    for handler in list(logger.handlers):
        if getattr(handler, "_tictactoe_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    handler._tictactoe_handler = True
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, always nested under the package logger."""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
