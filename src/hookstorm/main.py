"""Hookstorm main entry point."""

import uvicorn

from .config import get_settings
from .config.logging_config import LoggingConfig

# Configure logging based on environment
LoggingConfig.configure()

from .api import create_app

logger = LoggingConfig.get_logger(__name__)

# Create the FastAPI application
app = create_app()


def main() -> None:
    """Run the application."""
    settings = get_settings()
    
    logger.info(f"Starting hookstorm webhook server on {settings.host}:{settings.port}")
    
    uvicorn.run(
        "hookstorm.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
        access_log=True,
    )


if __name__ == "__main__":
    main()
