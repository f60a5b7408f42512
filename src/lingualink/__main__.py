"""Main entry point for the LinguaLink service.

Starts the FastAPI server with uvicorn.
"""

import uvicorn

from lingualink.config import get_settings
from lingualink.main import create_app
from lingualink.observability import get_logger, setup_logging


def main() -> None:
    """Main entry point for the LinguaLink service."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger = get_logger(__name__)

    logger.info("Starting LinguaLink service", host=settings.host, port=settings.port)

    app = create_app(settings)

    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(config)
    server.run()


if __name__ == "__main__":
    main()
