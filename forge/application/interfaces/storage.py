"""
File storage interface.
"""

from abc import ABC, abstractmethod


class PhotoStorageInterface(ABC):
    """Stores uploaded photo bytes and hands back a public name."""

    @abstractmethod
    async def save(self, original_filename: str, content: bytes) -> str:
        """Persist the file and return the stored filename."""
        pass

    @abstractmethod
    def url_for(self, stored_filename: str) -> str:
        """Public URL of a stored file."""
        pass

    @abstractmethod
    async def delete(self, stored_filename: str) -> None:
        """Remove a stored file. Missing files are ignored."""
        pass
