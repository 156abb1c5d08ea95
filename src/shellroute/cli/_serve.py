"""``shellroute serve`` — serve a static directory with no application code."""

import argparse
import sys

from shellroute.app import App
from shellroute.cli import configure_logging
from shellroute.config import AppConfig
from shellroute.errors import DirectoryReadError, DuplicateBindingError


def serve_directory(args: argparse.Namespace) -> None:
    """Bind ``args.directory`` under ``args.prefix`` and start serving."""
    defaults = AppConfig()
    config = AppConfig(
        host=args.host or defaults.host,
        port=args.port or defaults.port,
        log_level=args.log_level or defaults.log_level,
    )
    configure_logging(config.log_level)

    app = App(config)
    try:
        app.bind_static(args.directory, args.prefix)
    except (DirectoryReadError, DuplicateBindingError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    app.run()
