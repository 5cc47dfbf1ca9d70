"""
Logging helpers shared by the dispenser components.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(logger: logging.Logger, log_level: int) -> None:
    """
    Attach a stream handler to ``logger`` unless one is already present.

    Args:
        logger: The logger instance to configure
        log_level: Level applied to both the logger and its handler
    """
    logger.setLevel(log_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


def get_logger(name: str, log_level: int | None = None) -> logging.Logger:
    """Return the logger for ``name``, configured when a level is given."""
    logger = logging.getLogger(name)
    if log_level is not None:
        setup_logger(logger, log_level)
    return logger
