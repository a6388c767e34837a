"""``sitepack routes`` — list the routes embedded in a bundled document.

Decodes the route table without executing the document and prints
PATH, TITLE and BODY size columns, or the whole table with ``--json``.
"""

import argparse
import json
import sys
from pathlib import Path

from sitepack.errors import RouteTableDecodeError
from sitepack.routing.table import extract_route_table


def run_routes(args: argparse.Namespace) -> None:
    """Print the route table embedded in ``args.document``."""
    path = Path(args.document)
    try:
        document = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: Cannot read {path}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        table = extract_route_table(document)
    except RouteTableDecodeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.json:
        print(json.dumps(json.loads(table.to_json()), indent=2, ensure_ascii=False))
        return

    if not table:
        print("No routes embedded.")
        return

    rows: list[tuple[str, str, str]] = []
    for route_path, entry in table.items():
        rows.append((route_path, (entry.title or "").strip(), f"{len(entry.body.encode('utf-8'))} B"))

    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    max_title = max(max(len(r[1]) for r in rows), 5)  # "TITLE" header

    fmt = f"{{:<{max_path}}}  {{:<{max_title}}}  {{}}"
    print(fmt.format("PATH", "TITLE", "BODY"))
    print("-" * min(max_path + max_title + 10, 80))
    for row in rows:
        print(fmt.format(*row))
