"""Wren CLI — try patterns and list an app's routes.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren — reversible URL routing for single-page apps.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren match -------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match a path against a pattern")
    match_parser.add_argument("pattern", help=r"URL pattern (e.g. '/articles/(\d+)')")
    match_parser.add_argument("path", help="Path to match (e.g. /articles/42)")
    match_parser.add_argument(
        "--non-fragment",
        action="store_true",
        help="Match only the part of the pattern before '#'",
    )

    # -- wren reverse -----------------------------------------------------
    reverse_parser = subparsers.add_parser("reverse", help="Build a path from a pattern")
    reverse_parser.add_argument("pattern", help="URL pattern")
    reverse_parser.add_argument("args", nargs="*", help="Values for the pattern's groups")
    reverse_parser.add_argument(
        "--fragment",
        action="store_true",
        help="Write the '#' marker as '#' instead of '/'",
    )

    # -- wren routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List a router's routes")
    routes_parser.add_argument(
        "router",
        help="Router or Orchestrator import string (e.g. myapp.urls:router)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "match":
        from wren.cli._patterns import run_match

        run_match(args)
    elif args.command == "reverse":
        from wren.cli._patterns import run_reverse

        run_reverse(args)
    elif args.command == "routes":
        from wren.cli._routes import run_routes

        run_routes(args)
