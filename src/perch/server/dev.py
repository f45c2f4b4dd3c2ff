"""Server launch.

Starts a pounce ASGI server with the live perch App object.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from perch.app import App

logger = logging.getLogger("perch.server")


def run_server(
    app: App,
    host: str,
    port: int,
    *,
    workers: int = 1,
    reload: bool = False,
    log_level: str = "info",
    log_format: str = "text",
    app_path: str | None = None,
) -> None:
    """Start a pounce server with the given perch App.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but perch has a live ``App`` object. We use ``pounce.Server``
    directly with the ASGI callable.

    Args:
        app: ASGI callable (perch App instance).
        host: Bind host address.
        port: Bind port number.
        workers: Worker count.
        reload: Enable auto-reload on file changes.
        log_level: Log level (debug, info, warning, error, critical).
        log_format: Log format ("json" or "text").
        app_path: Optional ``"module:attribute"`` import string so
            pounce can reimport the app on reload.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        reload=reload,
        log_level=log_level,
        log_format=log_format,
    )
    logger.info("Serving %s on http://%s:%d", app.config.title, host, port)
    server = Server(config, app, app_path=app_path)
    server.run()
