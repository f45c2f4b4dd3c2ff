"""``perch routes`` — list registered routes in priority order."""

import argparse
import sys

from perch.cli._resolve import resolve_app


def run_routes(args: argparse.Namespace) -> None:
    """Print the app banner and a PATTERN / CAPTURES / RENDERER table."""
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    config = app.config
    banner = f"{config.title} {config.version}"
    if config.author:
        banner += f" by {config.author}"
    print(banner)
    if config.about:
        print(config.about)
    print()

    routes = app.routes
    if not routes:
        print("No routes registered.")
        return

    header = ("PATTERN", "CAPTURES", "RENDERER")
    rows = [
        (
            "/" + route.path.removeprefix("/"),
            ", ".join(route.capture_names) or "-",
            repr(route.renderer),
        )
        for route in routes
    ]
    widths = [max(len(row[i]) for row in (header, *rows)) for i in range(2)]

    fmt = f"{{:<{widths[0]}}}  {{:<{widths[1]}}}  {{}}"
    print(fmt.format(*header))
    print("-" * min(sum(widths) + 4 + max(len(r[2]) for r in rows), 80))
    for row in rows:
        print(fmt.format(*row))
