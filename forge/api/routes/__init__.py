"""
API routes package.
"""

from .health import router as health_router
from .jobs import router as jobs_router
from .plumber import router as plumber_router

__all__ = [
    "health_router",
    "jobs_router",
    "plumber_router",
]
