"""
Main application entry point.
"""

from forge.api.app import create_app
from forge.config.logging import get_logger
from forge.config.settings import settings

logger = get_logger(__name__)

app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting Forge marketplace server")

    uvicorn.run(
        "forge.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
