"""Listener – bind the TCP socket once and serve the app with uvicorn."""

from __future__ import annotations

import logging
import socket

import uvicorn

from src.app.config import Settings, settings
from src.app.main import app

logger = logging.getLogger(__name__)

_WILDCARD_HOSTS = {"", "0.0.0.0", "::"}


def bind_listener(host: str, port: int) -> socket.socket:
    """
    Create, bind and start listening on a TCP socket.

    Raises ``OSError`` if the address is already held by another listener.
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen()
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def listen_url(host: str, port: int) -> str:
    """URL printed at startup; wildcard hosts are shown as ``localhost``."""
    if host in _WILDCARD_HOSTS:
        host = "localhost"
    elif ":" in host:
        host = f"[{host}]"
    return f"http://{host}:{port}"


def run(app_settings: Settings | None = None) -> None:
    """Bind the listener, announce it, and serve until interrupted."""
    cfg = app_settings or settings

    try:
        sock = bind_listener(cfg.host, cfg.port)
    except OSError as exc:
        logger.error("Could not bind %s:%s – %s", cfg.host, cfg.port, exc)
        raise SystemExit(1) from exc

    logger.info("App listening at %s", listen_url(cfg.host, cfg.port))

    server = uvicorn.Server(
        uvicorn.Config(
            app,
            log_level=cfg.log_level.lower(),
            access_log=cfg.access_log,
        )
    )
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


if __name__ == "__main__":
    run()
