"""Entry point for the myapp HTTP API.

Binds and listens on ``0.0.0.0:8080`` and serves the FastAPI
application with Uvicorn on that socket.  If the port cannot be
bound (already in use, insufficient permission) the process logs a
fatal message and exits with status 1.  There is no retry.

Usage:
    python run.py
"""
import asyncio
import logging
import socket
import sys

from uvicorn import Config, Server

from myapp_api.app.core.config import settings
from myapp_api.app.core.logging_config import resolve_log_level, setup_logging
from myapp_api.app.main import app

logger = logging.getLogger(__name__)


def bind_listener(host: str, port: int) -> socket.socket:
    """Bind a TCP socket to ``host:port`` and start listening on it.

    Raises ``OSError`` if the address cannot be bound or listened on,
    after closing the socket.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen()
    except OSError:
        sock.close()
        raise
    return sock


def build_server() -> Server:
    """Create the Uvicorn server for the application."""
    # Requests are logged by the application's own middleware.
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        access_log=False,
        log_level=resolve_log_level(settings.log_level),
    )
    return Server(config)


async def run_api(sock: socket.socket) -> None:
    """Serve the application on an already listening socket."""
    await build_server().serve(sockets=[sock])


def main() -> None:
    setup_logging(settings.log_level, settings.log_file or None)
    try:
        sock = bind_listener(settings.host, settings.port)
    except OSError as exc:
        logger.critical("ListenAndServe: %s", exc)
        sys.exit(1)
    logger.info("Listening and serving HTTP on %s:%d", settings.host, settings.port)
    asyncio.run(run_api(sock))


if __name__ == "__main__":
    main()
