"""
File storage package.
"""

from .local_storage import LocalPhotoStorage

__all__ = ["LocalPhotoStorage"]
