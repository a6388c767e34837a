"""Route paths and the embedded route table."""

from sitepack.routing.route import RouteRecord, canonicalize_path
from sitepack.routing.table import (
    ROUTE_MAP_IDENTIFIER,
    RouteEntry,
    RouteTable,
    decode_route_table,
    extract_route_table,
    find_encoded_route_table,
)

__all__ = [
    "ROUTE_MAP_IDENTIFIER",
    "RouteEntry",
    "RouteRecord",
    "RouteTable",
    "canonicalize_path",
    "decode_route_table",
    "extract_route_table",
    "find_encoded_route_table",
]
