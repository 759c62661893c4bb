"""Wren CLI — inspect a pages directory's route table.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren — file-based route manifests for static sites.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log manifest construction and matching at debug level",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List routes in match order")
    routes_parser.add_argument(
        "pages",
        nargs="?",
        default="src/pages",
        help="Pages directory (default: src/pages)",
    )
    routes_parser.add_argument(
        "--root",
        default=".",
        help="Project root that component paths are relative to",
    )

    # -- wren match -------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Show which route serves a path")
    match_parser.add_argument("path", help="Request path (e.g. /blog/hello)")
    match_parser.add_argument(
        "--pages",
        default="src/pages",
        help="Pages directory (default: src/pages)",
    )
    match_parser.add_argument(
        "--root",
        default=".",
        help="Project root that component paths are relative to",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "routes":
        from wren.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from wren.cli._match import run_match

        run_match(args)
