"""
Logging setup for the layout repair service.

Every module logs through ``logging.getLogger(__name__)``; this installs
one stream handler on the package logger so the repair trail is visible
when the service or the CLI script runs.
"""

import logging
import sys
from typing import Optional, TextIO

from layout_repair.core.config import settings

LOGGER_NAME = "layout_repair"

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Safe to call more than once: the handler is only added when the
    logger has none yet, the level is always refreshed.

    Args:
        level: Level name overriding settings.LOG_LEVEL
        stream: Handler stream (stdout when omitted)

    Returns:
        The configured ``layout_repair`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger
