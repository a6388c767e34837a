"""Two-pass inlining over a whole site.

Pass 1 rewrites every stylesheet and script body, so references *inside*
them are resolved before they are concatenated into the shared bundle.
Text assets are re-encoded from their rewritten form and the pass repeats
until nothing changes: a stylesheet that imports another, a script that
names a stylesheet, or a page that links one, all get data URIs whose
contents no longer point at any original file. Pass 2 rewrites every
page against that final table, then splits each page into head and body
fragments.

Route-level ``<style>`` blocks are appended to the shared stylesheet, and
``<link rel="preload">`` tags are dropped (they would still point at
files that no longer exist).
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass

from sitepack.assets.mime import kind_for
from sitepack.assets.rewrite import rewrite
from sitepack.assets.table import AssetTable
from sitepack.assets.types import AssetRecord, MimeKind
from sitepack.config import BundleConfig
from sitepack.routing.route import RouteRecord
from sitepack.sources.types import SiteSource

logger = logging.getLogger("sitepack.assets")

_HEAD_RE = re.compile(r"<head[^>]*>([\s\S]*?)</head>", re.IGNORECASE)
_BODY_RE = re.compile(r"<body[^>]*>([\s\S]*?)</body>", re.IGNORECASE)
_STYLE_RE = re.compile(r"<style[^>]*>([\s\S]*?)</style>", re.IGNORECASE)
_PRELOAD_RE = re.compile(r"<link[^>]+rel=[\"']preload[\"'][^>]*>", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class InlinedSite:
    """Output of the reference rewriter.

    Attributes:
        build_id: Build identifier from the source tree.
        routes: One record per page, rewritten and split.
        css: Rewritten stylesheets plus route-level ``<style>`` contents.
        js: Rewritten scripts, concatenated in source order.
        table: The final asset table pages were resolved against; text
            assets in it are encoded from their rewritten form.
    """

    build_id: str
    routes: tuple[RouteRecord, ...]
    css: str
    js: str
    table: AssetTable

    def get_route(self, path: str) -> RouteRecord | None:
        for route in self.routes:
            if route.path == path:
                return route
        return None


def extract_head(html: str) -> str:
    match = _HEAD_RE.search(html)
    return match.group(1) if match else ""


def extract_body(html: str) -> str:
    match = _BODY_RE.search(html)
    return match.group(1) if match else ""


def extract_styles(html: str) -> list[str]:
    """Contents of every ``<style>`` block, in document order."""
    return _STYLE_RE.findall(html)


def strip_preloads(html: str) -> str:
    return _PRELOAD_RE.sub("", html)


def collect_records(
    source: SiteSource,
    *,
    css_files: Mapping[str, str] | None = None,
    js_files: Mapping[str, str] | None = None,
) -> list[AssetRecord]:
    """Asset records in table order: fonts, images, stylesheets, scripts.

    *css_files* and *js_files* replace the source text of those assets,
    so a table can carry their rewritten form.
    """
    css_files = source.css_files if css_files is None else css_files
    js_files = source.js_files if js_files is None else js_files
    records: list[AssetRecord] = []
    for path, data in source.font_files.items():
        records.append(AssetRecord(path, MimeKind.FONT, data))
    for path, data in source.image_files.items():
        records.append(AssetRecord(path, kind_for(path), data))
    for path, text in css_files.items():
        records.append(AssetRecord(path, MimeKind.STYLE, text))
    for path, text in js_files.items():
        records.append(AssetRecord(path, MimeKind.SCRIPT, text))
    return records


def inline_site(source: SiteSource, config: BundleConfig | None = None) -> InlinedSite:
    """Encode every asset and rewrite every reference to it.

    Args:
        source: Routes and asset payloads from the source reader.
        config: Static prefix, asset segments, preload stripping.

    Returns:
        The rewritten site, ready for route-table generation and
        composition.
    """
    config = config or BundleConfig()

    def apply(text: str, table: AssetTable) -> str:
        return rewrite(
            text,
            table,
            static_prefix=config.static_prefix,
            asset_segments=config.asset_segments,
        )

    # Pass 1: stylesheets and scripts. Each round rewrites the source text
    # against the previous round's table, so a chain of n nested text
    # references settles within n + 1 rounds.
    css_files = dict(source.css_files)
    js_files = dict(source.js_files)
    table = AssetTable.build(collect_records(source))
    for _ in range(len(css_files) + len(js_files) + 1):
        next_css = {path: apply(text, table) for path, text in source.css_files.items()}
        next_js = {path: apply(text, table) for path, text in source.js_files.items()}
        if next_css == css_files and next_js == js_files:
            break
        css_files, js_files = next_css, next_js
        table = AssetTable.build(collect_records(source, css_files=css_files, js_files=js_files))
    else:
        logger.warning(
            "Stylesheets or scripts reference each other in a cycle; "
            "the innermost copies keep their original paths"
        )
    logger.info("Encoded %d assets", len(table))

    # Pass 2: pages.
    routes: list[RouteRecord] = []
    route_styles: list[str] = []
    for page in source.routes:
        html = apply(page.html, table)
        for block in extract_styles(html):
            if block not in route_styles:
                route_styles.append(block)
        if config.strip_preloads:
            html = strip_preloads(html)
        routes.append(
            RouteRecord(
                path=page.path,
                head=extract_head(html),
                body=extract_body(html),
                html=html,
            )
        )
        logger.debug("Rewrote route %s (%s)", page.path, page.html_file)

    css = "\n".join(css_files.values())
    route_css = "\n".join(route_styles)
    if route_css:
        css += "\n" + route_css

    return InlinedSite(
        build_id=source.build_id,
        routes=tuple(routes),
        css=css,
        js="\n".join(js_files.values()),
        table=table,
    )
