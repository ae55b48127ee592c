"""Wayfinder CLI: inspect the routing table and resolve paths.

Entry point registered as ``wayfinder`` in ``pyproject.toml``::

    [project.scripts]
    wayfinder = "wayfinder.cli:main"
"""

import argparse
import logging
import sys


def _add_config_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--landing-path", default=None, help="Canonical landing path (default: /explore)")
    parser.add_argument("--client-url", default=None, help="Origin prepended to login return targets")
    parser.add_argument("--case-sensitive", action="store_true", help="Match literal segments case-sensitively")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wayfinder`` command."""
    parser = argparse.ArgumentParser(
        prog="wayfinder",
        description="Wayfinder: route resolution and modal overlays.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log routing decisions to stderr")
    subparsers = parser.add_subparsers(dest="command")

    # -- wayfinder routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List redirects and rules in priority order")
    _add_config_flags(routes_parser)

    # -- wayfinder resolve ------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a path for a session status")
    resolve_parser.add_argument("path", help="URL path, optionally with a query string")
    _add_config_flags(resolve_parser)
    session = resolve_parser.add_mutually_exclusive_group()
    session.add_argument("--user", metavar="USERNAME", help="Resolve as a signed-in user with this handle")
    session.add_argument(
        "--onboarding",
        action="store_true",
        help="Resolve as a signed-in user who has no handle yet",
    )
    session.add_argument(
        "--resolving",
        action="store_true",
        help="Resolve while the session is still loading",
    )
    resolve_parser.add_argument(
        "--from",
        dest="from_path",
        default=None,
        help="Navigate here first; with --modal, PATH opens over it",
    )
    resolve_parser.add_argument(
        "--modal",
        action="store_true",
        help="Mark the navigation as modal-intending and enable the overlay",
    )
    resolve_parser.add_argument(
        "--maintenance",
        action="store_true",
        help="Resolve with maintenance mode on",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s", stream=sys.stderr)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from wayfinder.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from wayfinder.cli._resolve import run_resolve

        run_resolve(args)
