"""
Local disk storage for job photos.
"""

import asyncio
import secrets
import time
from pathlib import Path

from forge.application.interfaces.storage import PhotoStorageInterface
from forge.config.logging import get_logger
from forge.config.settings import settings

logger = get_logger(__name__)


class LocalPhotoStorage(PhotoStorageInterface):
    """Writes uploads into a directory served under a URL prefix."""

    def __init__(self, upload_dir: str = None, url_prefix: str = None):
        self.upload_dir = Path(upload_dir or settings.UPLOAD_DIR)
        self.url_prefix = (url_prefix or settings.UPLOAD_URL_PREFIX).rstrip("/")

    async def save(self, original_filename: str, content: bytes) -> str:
        """Persist the file under a collision-free name."""
        suffix = Path(original_filename).suffix.lower()
        stored_filename = (
            f"photo-{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{suffix}"
        )
        target = self.upload_dir / stored_filename

        await asyncio.to_thread(self._write, target, content)

        logger.info(
            "Photo stored",
            filename=stored_filename,
            size_bytes=len(content),
        )
        return stored_filename

    async def delete(self, stored_filename: str) -> None:
        target = self.upload_dir / stored_filename
        await asyncio.to_thread(target.unlink, missing_ok=True)
        logger.info("Photo removed", filename=stored_filename)

    def url_for(self, stored_filename: str) -> str:
        return f"{self.url_prefix}/{stored_filename}"

    @staticmethod
    def _write(target: Path, content: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
