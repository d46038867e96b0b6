"""Logging configuration."""

import logging
from typing import Optional

PACKAGE_LOGGER = "kube_scanner"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a configured logger instance."""
    logger = logging.getLogger(name or PACKAGE_LOGGER)

    # Only configure if no handlers exist
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)

    return logger


def set_log_level(level: int) -> None:
    """Set the level of every logger already created under the package."""
    for name, logger in logging.Logger.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and name.startswith(PACKAGE_LOGGER):
            logger.setLevel(level)
