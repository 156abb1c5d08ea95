"""``shellroute run`` — serve an App given by import string."""

import argparse
import sys

from shellroute.cli import configure_logging
from shellroute.cli._resolve import resolve_app


def run_app(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and hand it to the pounce server.

    CLI flags override the app's config.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    configure_logging(args.log_level or app.config.log_level)
    app._ensure_frozen()

    from shellroute.server.dev import run_server

    run_server(
        app,
        args.host or app.config.host,
        args.port or app.config.port,
        reload=args.reload or app.config.reload,
        app_path=args.app,
    )
