"""Translate parsed CLI arguments into a ``BundleConfig``."""

import argparse
import sys
from dataclasses import replace

from sitepack.config import BundleConfig
from sitepack.errors import ConfigurationError


def config_from_args(args: argparse.Namespace) -> BundleConfig:
    """Apply command-line overrides to the default configuration.

    Prints ``Error: ...`` and exits 1 when an override is invalid.
    """
    overrides: dict[str, object] = {"input_dir": args.input}
    if getattr(args, "output", None):
        overrides["output_file"] = args.output
    if args.mount_id is not None:
        overrides["mount_id"] = args.mount_id
    if args.static_prefix is not None:
        overrides["static_prefix"] = args.static_prefix
    if args.no_minify:
        overrides["minify"] = False
    if args.keep_preloads:
        overrides["strip_preloads"] = False
    if args.no_next_compat:
        overrides["next_compat"] = False

    try:
        return replace(BundleConfig(), **overrides)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
