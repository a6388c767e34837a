"""Data models for a read site directory.

Immutable frozen dataclasses handed from the source reader to the asset
pipeline. Built once per run during the directory walk.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class SourceRoute:
    """One HTML page found in the site directory.

    Attributes:
        path: Canonical route path (``/``, ``/about``, ``/blog/first-post``).
        html_file: File the page was read from, relative to the input root.
        html: Full page markup.
    """

    path: str
    html_file: str
    html: str


def _empty() -> Mapping[str, object]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class SiteSource:
    """Everything the asset pipeline needs from the filesystem.

    Asset maps are keyed by root-relative logical path with a leading
    slash (``/_next/static/css/app.css``) and keep walk order. They are
    wrapped read-only on construction.
    """

    build_id: str
    routes: tuple[SourceRoute, ...] = ()
    css_files: Mapping[str, str] = field(default_factory=_empty)
    js_files: Mapping[str, str] = field(default_factory=_empty)
    font_files: Mapping[str, bytes] = field(default_factory=_empty)
    image_files: Mapping[str, bytes] = field(default_factory=_empty)

    def __post_init__(self) -> None:
        for name in ("css_files", "js_files", "font_files", "image_files"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))
        object.__setattr__(self, "routes", tuple(self.routes))

    def route_paths(self) -> tuple[str, ...]:
        return tuple(route.path for route in self.routes)

    def get_route(self, path: str) -> SourceRoute | None:
        for route in self.routes:
            if route.path == path:
                return route
        return None
