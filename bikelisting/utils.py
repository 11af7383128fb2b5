"""Shared logging helpers.

Every module logs through `get_logger`, so the level follows LOG_LEVEL
from the environment or a .env file.
"""
import logging

from .config import settings


def get_logger(name=__name__):
    logging.basicConfig(
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        level=getattr(logging, settings.log_level, logging.INFO)
    )
    return logging.getLogger(name)

logger = get_logger("bike-listing")
