# ticketdesk/core/logging.py
"""Structured logger setup shared across the app."""

import logging
from pythonjsonlogger.json import JsonFormatter

from ticketdesk.core.config import get_settings


def get_logger(name: str) -> logging.Logger:
    """
    Configure a JSON logger once and reuse it.

    The level comes from ``Settings.LOG_LEVEL``.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = JsonFormatter(
        "%(levelname)s %(name)s %(message)s %(asctime)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(get_settings().LOG_LEVEL.upper())
    logger.propagate = False
    return logger
