"""Spur CLI — inspect, match and reverse-build the routes of a router.

Entry point registered as ``spur`` in ``pyproject.toml``::

    [project.scripts]
    spur = "spur.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``spur`` command."""
    parser = argparse.ArgumentParser(
        prog="spur",
        description="Spur — named URL routes with regex matching and reverse routing.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- spur routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:router)")

    # -- spur match -------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Show the route matching a request")
    match_parser.add_argument("app", help="Import string (e.g. myapp:router)")
    match_parser.add_argument("method", help="HTTP method (e.g. GET)")
    match_parser.add_argument("path", help="Request path (e.g. /posts/25)")

    # -- spur path --------------------------------------------------------
    path_parser = subparsers.add_parser("path", help="Build the path of a named route")
    path_parser.add_argument("app", help="Import string (e.g. myapp:router)")
    path_parser.add_argument("name", help="Route name")
    path_parser.add_argument("args", nargs="*", help="Parameter values, in order")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from spur.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from spur.cli._match import run_match

        run_match(args)
    elif args.command == "path":
        from spur.cli._path import run_path

        run_path(args)
