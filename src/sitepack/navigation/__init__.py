"""In-document navigation engine.

Generates the client-side router shipped inside the bundled document.
"""

from sitepack.navigation.generator import build_route_table, generate
from sitepack.navigation.runtime import (
    DEFAULT_ROUTE_CHANGE_EVENT,
    DEFAULT_ROUTER_GLOBAL,
    navigation_runtime,
)

__all__ = [
    "DEFAULT_ROUTER_GLOBAL",
    "DEFAULT_ROUTE_CHANGE_EVENT",
    "build_route_table",
    "generate",
    "navigation_runtime",
]
