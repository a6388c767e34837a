"""``sitepack build`` — bundle a static export into one HTML document.

Reads the input directory, runs the full pipeline, writes the output
file, and prints a short summary. Exits with code 1 on any build error.
"""

import argparse
import sys

from sitepack.build import build_bundle
from sitepack.cli._config import config_from_args
from sitepack.errors import SitepackError


def run_build(args: argparse.Namespace) -> None:
    """Build ``args.input`` into ``args.output``."""
    config = config_from_args(args)
    try:
        result = build_bundle(config)
    except SitepackError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"Bundled {len(result.routes)} routes into {result.output_file}")
    for path in result.routes:
        print(f"  {path}")
    print(f"Size: {result.size / 1024:.1f} KB ({result.duration:.2f}s)")
