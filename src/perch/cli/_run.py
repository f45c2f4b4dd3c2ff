"""``perch run`` — resolve an app and serve it."""

import argparse
import logging
import sys

from perch.cli._resolve import resolve_app
from perch.errors import ConfigurationError


def run_server(args: argparse.Namespace) -> None:
    """Start the pounce server for ``args.app``.

    CLI flags override the app's config. The app is frozen before the
    server starts, so template errors exit with status 1.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    host = args.host or app.config.host
    port = args.port or app.config.port
    log_level = args.log_level or app.config.log_level
    logging.basicConfig(level=log_level.upper())

    try:
        app._ensure_frozen()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from perch.server.dev import run_server as _run

    _run(
        app,
        host,
        port,
        workers=app.config.workers,
        reload=app.config.debug,
        log_level=log_level,
        log_format=app.config.log_format,
        app_path=args.app,
    )
