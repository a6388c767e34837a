"""Navigation engine generator.

Turns rewritten routes into the route table and emits the runtime source
with the table embedded.
"""

from collections.abc import Iterable

from sitepack.config import BundleConfig
from sitepack.navigation.runtime import navigation_runtime, next_compat_snippet
from sitepack.routing.route import RouteRecord
from sitepack.routing.table import RouteTable


def build_route_table(routes: Iterable[RouteRecord]) -> RouteTable:
    """Map canonical route paths to head/body fragments (first record wins)."""
    return RouteTable.from_records(routes)


def generate(
    routes: RouteTable | Iterable[RouteRecord],
    config: BundleConfig | None = None,
    *,
    build_id: str = "unknown",
) -> str:
    """Return the navigation runtime source for *routes*.

    The route table is serialized to JSON, base64-encoded and assigned to
    ``ROUTE_MAP_BASE64`` inside the script, so it can be recovered with
    :func:`sitepack.routing.extract_route_table` without running anything.
    """
    config = config or BundleConfig()
    table = routes if isinstance(routes, RouteTable) else build_route_table(routes)
    compat = next_compat_snippet(build_id) if config.next_compat else ""
    return navigation_runtime(
        table.encode(),
        mount_id=config.mount_id,
        not_found_routes=config.not_found_routes,
        router_global=config.router_global,
        route_change_event=config.route_change_event,
        compat=compat,
    )
