"""Core utilities"""

from .config import Settings, get_settings
from .logging import setup_logger

__all__ = ["Settings", "get_settings", "setup_logger"]
