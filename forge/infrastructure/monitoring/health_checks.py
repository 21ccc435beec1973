"""
Component health checks for the health endpoints.
"""

import asyncio
import os
import time
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from forge.config.logging import get_logger
from forge.config.settings import settings

logger = get_logger(__name__)

Check = Callable[[], Awaitable[Dict[str, Any]]]


class HealthChecker:
    """Runs each component check under a timeout and collects the results."""

    def __init__(self, db_session: AsyncSession, upload_dir: str = None):
        self.db_session = db_session
        self.upload_dir = Path(upload_dir or settings.UPLOAD_DIR)
        self.checks: Dict[str, Check] = {
            "database": self._check_database,
            "photo_storage": self._check_photo_storage,
        }

    async def check_all_components(self) -> Dict[str, Any]:
        """Run all checks; a failing or slow check is reported, never raised."""
        results = {}
        for name, check in self.checks.items():
            try:
                results[name] = await asyncio.wait_for(
                    check(), timeout=settings.HEALTH_CHECK_TIMEOUT
                )
            except asyncio.TimeoutError:
                logger.error("Health check timed out", check_name=name)
                results[name] = {"status": "error", "error": "timeout"}
            except Exception as e:
                logger.error("Health check failed", check_name=name, error=str(e))
                results[name] = {"status": "error", "error": str(e)}

        return results

    async def check_readiness(self) -> bool:
        """Ready only when every component reports healthy."""
        results = await self.check_all_components()
        return all(result.get("status") == "healthy" for result in results.values())

    async def _check_database(self) -> Dict[str, Any]:
        start_time = time.perf_counter()
        result = await self.db_session.execute(text("SELECT 1"))
        result.scalar_one()

        return {
            "status": "healthy",
            "response_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
        }

    async def _check_photo_storage(self) -> Dict[str, Any]:
        writable = await asyncio.to_thread(self._upload_dir_writable)
        if not writable:
            return {"status": "unhealthy", "error": f"{self.upload_dir} not writable"}
        return {"status": "healthy", "path": str(self.upload_dir)}

    def _upload_dir_writable(self) -> bool:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        return os.access(self.upload_dir, os.W_OK)
