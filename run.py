"""Entry point for serving the Records API.

Launches the FastAPI application with uvicorn.  Host and port are read
from ``API_HOST`` and ``API_PORT`` (defaults ``0.0.0.0`` and ``8000``);
other configuration such as ``DATABASE_URL`` and ``SECRET_KEY`` is read
from the environment by ``records_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from records_api.app.core.config import settings
from records_api.app.main import create_app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=create_app(),
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Records API stopped")
