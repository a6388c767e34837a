"""Sitepack — bundle a static site export into one self-contained HTML file.

Every asset (stylesheets, scripts, fonts, images) is inlined, and every
page becomes a route of an in-document hash router, so the result opens
from disk, an email attachment, or any host without a server.

Basic usage::

    from sitepack import BundleConfig, build_bundle

    result = build_bundle(BundleConfig(input_dir="out"))
    print(f"{len(result.routes)} routes, {result.size} bytes")

In-memory pipeline::

    from sitepack import bundle_site, read_site

    result = bundle_site(read_site(input_dir="out"))
    html = result.document
"""

__version__ = "0.1.0"
__all__ = [
    "AssetTable",
    "BuildResult",
    "BundleConfig",
    "ConfigurationError",
    "DuplicateAssetError",
    "MissingIndexRouteError",
    "RouteTable",
    "RouteTableDecodeError",
    "SitepackError",
    "SourceError",
    "build_bundle",
    "bundle_site",
    "compose_document",
    "extract_route_table",
    "generate",
    "inline_site",
    "read_site",
    "rewrite",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import sitepack`` fast while providing a clean top-level API.
    """
    if name == "BundleConfig":
        from sitepack.config import BundleConfig

        return BundleConfig

    if name in ("BuildResult", "build_bundle", "bundle_site"):
        from sitepack import build as _build

        return getattr(_build, name)

    if name == "read_site":
        from sitepack.sources import read_site

        return read_site

    if name in ("AssetTable", "inline_site", "rewrite"):
        from sitepack import assets as _assets

        return getattr(_assets, name)

    if name in ("RouteTable", "extract_route_table"):
        from sitepack.routing import table as _table

        return getattr(_table, name)

    if name == "generate":
        from sitepack.navigation import generate

        return generate

    if name == "compose_document":
        from sitepack.document import compose_document

        return compose_document

    if name in (
        "ConfigurationError",
        "DuplicateAssetError",
        "MissingIndexRouteError",
        "RouteTableDecodeError",
        "SitepackError",
        "SourceError",
    ):
        from sitepack import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
