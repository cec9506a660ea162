"""Entry point for the Banking API server.

Starts the FastAPI application with Uvicorn on the configured host and
port (``HOST``/``PORT``, default ``0.0.0.0:3001``).  Configuration such
as ``DEFAULT_USER_PASSWORD`` may be placed in a `.env` file in the
working directory.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from banking_api.app.core.config import settings
from banking_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Logging is configured by create_app; see core.logging_config.
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server running on http://localhost:%d", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
