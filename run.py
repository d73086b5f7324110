"""Entry point for the Users API server.

Serves :data:`users_api.app.main.app` with Uvicorn.  Host and port are
read from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``4000``); see ``users_api.app.core.config`` for the
other supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from users_api.app.core.config import settings
from users_api.app.main import app


logger = logging.getLogger("users_api.run")


async def serve(server: Server, poll_interval: float = 0.05) -> None:
    """Run ``server`` until it exits, announcing the port once it is bound.

    Uvicorn sets ``server.started`` after the listening socket is open; if
    binding fails it exits during startup and nothing is announced.
    """
    serve_task = asyncio.create_task(server.serve())
    while not server.started and not serve_task.done():
        await asyncio.sleep(poll_interval)
    if server.started:
        logger.info("Server is listening on port %s", server.config.port)
    await serve_task


async def run_api() -> None:
    """Start the API using Uvicorn and serve until terminated."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    await serve(Server(config))


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
