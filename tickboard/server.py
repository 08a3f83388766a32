"""Listener binding and the uvicorn serve loop."""

import logging
import socket

import uvicorn

from tickboard.config import Settings, settings as default_settings
from tickboard.main import app

logger = logging.getLogger(__name__)


def bind_listener(host: str, port: int) -> socket.socket:
    """Bind and listen on (host, port). Raises OSError if the port is unusable."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen()
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def serve(settings: Settings | None = None) -> None:
    """Bind the listener, log the port, and serve until terminated.

    A bind failure is fatal: it is logged and the process exits with status 1.
    """
    settings = settings or default_settings

    try:
        sock = bind_listener(settings.host, settings.port)
    except OSError as e:
        logger.error(f"Could not bind {settings.host}:{settings.port}: {e}")
        raise SystemExit(1) from e

    port = sock.getsockname()[1]
    logger.info(f"Server listening on port {port}")

    config = uvicorn.Config(app, log_level=settings.log_level)
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
