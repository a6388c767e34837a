"""Sitepack CLI — build, inspect, and benchmark single-file bundles.

Entry point registered as ``sitepack`` in ``pyproject.toml``::

    [project.scripts]
    sitepack = "sitepack.cli:main"
"""

import argparse
import logging
import os
import sys

LOG_LEVEL_ENV = "SITEPACK_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _add_input_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "input",
        nargs="?",
        default="out",
        help="Static export directory (default: out)",
    )


def _add_bundle_options(parser: argparse.ArgumentParser) -> None:
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Log warnings only")
    parser.add_argument("--mount-id", default=None, help="Element id swapped per route")
    parser.add_argument("--static-prefix", default=None, help="URL prefix of static assets")
    parser.add_argument(
        "--no-minify",
        action="store_true",
        help="Keep the document's original whitespace and comments",
    )
    parser.add_argument(
        "--keep-preloads",
        action="store_true",
        help="Keep <link rel=preload> hints in route fragments",
    )
    parser.add_argument(
        "--no-next-compat",
        action="store_true",
        help="Omit the __NEXT_DATA__ stub and currentScript shims",
    )


def configure_logging(args: argparse.Namespace) -> None:
    """Set the root log level from ``-v``/``-q`` or ``SITEPACK_LOG_LEVEL``."""
    if getattr(args, "verbose", False):
        level: int | str = logging.DEBUG
    elif getattr(args, "quiet", False):
        level = logging.WARNING
    else:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
        if not isinstance(logging.getLevelName(level), int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``sitepack`` command."""
    parser = argparse.ArgumentParser(
        prog="sitepack",
        description="Sitepack — bundle a static site export into one HTML file.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- sitepack build ---------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Bundle a site into one document")
    _add_input_argument(build_parser)
    build_parser.add_argument(
        "-o",
        "--output",
        default="dist/index.html",
        help="Output file (default: dist/index.html)",
    )
    _add_bundle_options(build_parser)

    # -- sitepack routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List routes embedded in a document")
    routes_parser.add_argument("document", help="Bundled HTML document")
    routes_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the decoded route table as JSON",
    )

    # -- sitepack bench ---------------------------------------------------
    bench_parser = subparsers.add_parser("bench", help="Time the in-memory pipeline")
    _add_input_argument(bench_parser)
    bench_parser.add_argument(
        "--iterations",
        type=int,
        default=5,
        help="Number of pipeline runs (default: 5)",
    )
    _add_bundle_options(bench_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    configure_logging(args)

    if args.command == "build":
        from sitepack.cli._build import run_build

        run_build(args)
    elif args.command == "routes":
        from sitepack.cli._routes import run_routes

        run_routes(args)
    elif args.command == "bench":
        from sitepack.cli._bench import run_bench

        run_bench(args)
