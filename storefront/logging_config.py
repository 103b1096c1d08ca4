"""Logging setup.

The terminal belongs to the UI, so records go to a file instead of stderr.
"""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HANDLER_NAME = "storefront-file"

logger = logging.getLogger("storefront")


def setup_logging(level: str = "INFO", log_file: str = "storefront.log") -> logging.Logger:
    """Attach a file handler to the package logger (once)."""
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False

    if any(handler.get_name() == HANDLER_NAME for handler in logger.handlers):
        return logger

    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.set_name(HANDLER_NAME)
    logger.addHandler(handler)
    return logger
