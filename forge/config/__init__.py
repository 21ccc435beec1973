"""
Configuration package.
"""

from .database import dispose_engine, get_db_session
from .logging import configure_logging, get_logger
from .settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
    "configure_logging",
    "get_logger",
    "get_db_session",
    "dispose_engine",
]
