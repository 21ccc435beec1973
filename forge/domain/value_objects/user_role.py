"""
User role value object.
"""

from enum import Enum


class UserRole(str, Enum):
    """Marketplace user roles."""

    PLUMBER = "PLUMBER"
    DISPATCHER = "DISPATCHER"
    HOMEOWNER = "HOMEOWNER"
    ADMIN = "ADMIN"
