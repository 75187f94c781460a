"""
Miscellaneous utilities shared across hobson-trains.
"""

from .logging import configure_logging, logger
from .config import config

__all__ = ["configure_logging", "logger", "config"]
