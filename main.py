"""Game Trends API server entry point"""

import logging

import uvicorn

from app import create_app
from core.config import get_settings

logger = logging.getLogger(__name__)

app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    base = f"http://localhost:{settings.port}"
    logger.info(f"Server is running on {base}")
    for path in ("/api/trending", "/api/genre-trends", "/api/platform-performance"):
        logger.info(f"GET {base}{path}")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
