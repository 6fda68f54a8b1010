"""
Server Entry Point - Main Layer

Runs the FastAPI application under uvicorn using the configured
host and port.
"""

import uvicorn

from src.main.config import get_settings
from src.shared import configure_logging, get_logger, update_logging_from_settings

logger = get_logger(__name__)


def main() -> None:
    """Start the HTTP server."""

    configure_logging()
    settings = get_settings()
    update_logging_from_settings(settings)

    logger.info(
        "Starting HTTP server",
        host=settings.service.host,
        port=settings.service.port,
        reload=settings.service.reload,
    )

    uvicorn.run(
        "src.main.app:app",
        host=settings.service.host,
        port=settings.service.port,
        reload=settings.service.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
