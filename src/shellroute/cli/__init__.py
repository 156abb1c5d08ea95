"""Shellroute CLI — serve an app or a bare static directory.

Entry point registered as ``shellroute`` in ``pyproject.toml``::

    [project.scripts]
    shellroute = "shellroute.cli:main"
"""

import argparse
import logging
import sys


def configure_logging(level: str) -> None:
    """Send shellroute's log records to stderr at *level*."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``shellroute`` command."""
    parser = argparse.ArgumentParser(
        prog="shellroute",
        description="Shellroute — a minimal HTTP routing shell with static asset binding.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error"],
        help="Logging level (default: the app's configured level)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- shellroute run ---------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve a shellroute App")
    run_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change",
    )

    # -- shellroute serve -------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Serve a directory of static files")
    serve_parser.add_argument("directory", help="Root directory of the static assets")
    serve_parser.add_argument("--prefix", default="/", help="Route prefix (default: /)")
    serve_parser.add_argument("--host", default=None, help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port number")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from shellroute.cli._run import run_app

        run_app(args)
    elif args.command == "serve":
        from shellroute.cli._serve import serve_directory

        serve_directory(args)
