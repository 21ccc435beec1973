"""
Security package.
"""

from .tokens import AuthUser, create_access_token, decode_access_token

__all__ = ["AuthUser", "create_access_token", "decode_access_token"]
