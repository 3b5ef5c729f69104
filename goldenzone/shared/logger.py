"""
Logger - shared logging setup
"""
import logging
import sys

from goldenzone.shared.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str, level: str = LOG_LEVEL) -> logging.Logger:
    """
    Get a logger writing to stderr.

    Calling it again for the same name returns the same logger without
    stacking another handler.

    Args:
        name: Logger name, usually __name__
        level: Level name (e.g. "INFO", "DEBUG")

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
