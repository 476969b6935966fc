"""
Logging utility for the menu options engine.
"""
import logging
import sys
from typing import Dict, Optional

import colorlog
from config.config import config

LOG_COLORS: Dict[str, str] = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}

# Loggers handed out by setup_logger, so the CLI can change their level later
_configured_loggers: Dict[str, logging.Logger] = {}


def _build_formatter(logging_config) -> logging.Formatter:
    if logging_config["use_color"]:
        return colorlog.ColoredFormatter(
            "%(log_color)s" + logging_config["format"],
            datefmt=logging_config["datefmt"],
            reset=True,
            log_colors=LOG_COLORS,
            style="%",
        )
    return logging.Formatter(
        logging_config["format"], datefmt=logging_config["datefmt"]
    )


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Set up and return a logger with the given name.

    Args:
        name: Name of the logger, usually ``__name__``.
        level: Optional level overriding ``logging.level`` from config.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)
    logging_config = config.get_logging_config()

    logger.setLevel(getattr(logging, (level or logging_config["level"]).upper()))

    # Avoid adding handlers if they already exist
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(_build_formatter(logging_config))
        logger.addHandler(handler)

    _configured_loggers[name] = logger
    return logger


def set_log_level(level: str) -> None:
    """
    Change the level of every logger created through setup_logger.

    Args:
        level: Level name such as "DEBUG" or "warning".
    """
    numeric_level = getattr(logging, level.upper())
    config.set("logging.level", level.upper())
    for logger in _configured_loggers.values():
        logger.setLevel(numeric_level)
