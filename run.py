"""Entry point for the Car GraphQL Server.

Serves the FastAPI application with uvicorn.  Host, port and log level
come from the ``HOST``, ``PORT`` and ``LOG_LEVEL`` environment
variables (see ``car_graphql_server.app.core.config``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from car_graphql_server.app.core.config import settings
from car_graphql_server.app.main import app


async def main() -> None:
    """Run the server until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
