"""Logging configuration"""

import logging
import sys
from typing import Optional


def setup_logger(name: str, level: Optional[str] = "INFO") -> logging.Logger:
    """Configure a stdout logger; child loggers (``name.*``) propagate to it."""
    level = (level or "INFO").upper()

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level))

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
