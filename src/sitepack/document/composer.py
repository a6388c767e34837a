"""Document composer — wraps the rewritten site into one HTML file.

Takes the shell of the index route (``<html>`` and ``<body>`` attributes,
title, meta tags), the shared stylesheet and script bundle, and the
navigation runtime, renders them into the shell template, then compacts
whitespace.
"""

import re

from kida.template import Markup

from sitepack.assets.inline import InlinedSite
from sitepack.config import BundleConfig
from sitepack.document.compact import compact_html, escape_script, escape_style
from sitepack.document.shell import render_shell
from sitepack.document.shims import RUNTIME_SHIMS_JS
from sitepack.errors import MissingIndexRouteError

_HTML_ATTRS_RE = re.compile(r"<html([^>]*)>", re.IGNORECASE)
_BODY_ATTRS_RE = re.compile(r"<body([^>]*)>", re.IGNORECASE)
_TITLE_RE = re.compile(r"<title[^>]*>([\s\S]*?)</title>", re.IGNORECASE)
_META_RE = re.compile(r"<meta[^>]*>", re.IGNORECASE)
_ATTR_RE = re.compile(r"""([\w:-]+)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+))""")

# The shell writes these itself.
_SHELL_META = frozenset({"viewport"})
_META_KEYS = ("name", "property", "http-equiv", "itemprop")

DEFAULT_TITLE = "App"


def extract_html_attrs(html: str, *, lang: str = "en") -> str:
    match = _HTML_ATTRS_RE.search(html)
    if match and match.group(1).strip():
        return match.group(1)
    return f' lang="{lang}"'


def extract_body_attrs(html: str) -> str:
    match = _BODY_ATTRS_RE.search(html)
    return match.group(1) if match else ""


def extract_title(head: str) -> str:
    match = _TITLE_RE.search(head)
    return match.group(1) if match and match.group(1) else DEFAULT_TITLE


def _meta_attrs(tag: str) -> dict[str, str]:
    attrs: dict[str, str] = {}
    for name, dq, sq, bare in _ATTR_RE.findall(tag):
        attrs[name.lower()] = dq or sq or bare
    return attrs


def extract_meta(head: str) -> list[str]:
    """``<meta>`` tags from *head*, minus the ones the shell writes.

    Drops ``charset`` and ``viewport`` tags, then keeps the first tag per
    ``name`` / ``property`` / ``http-equiv`` / ``itemprop`` key, and the
    first of any exact duplicates.
    """
    tags: list[str] = []
    seen: set[tuple[str, str] | str] = set()
    for tag in _META_RE.findall(head):
        attrs = _meta_attrs(tag)
        if "charset" in attrs or attrs.get("name", "").lower() in _SHELL_META:
            continue
        key: tuple[str, str] | str = tag
        for attr in _META_KEYS:
            if attr in attrs:
                key = (attr, attrs[attr].lower())
                break
        if key in seen:
            continue
        seen.add(key)
        tags.append(tag)
    return tags


def compose_document(
    site: InlinedSite,
    router_js: str,
    config: BundleConfig | None = None,
) -> str:
    """Render the final single-file document.

    Raises:
        MissingIndexRouteError: *site* has no ``/`` route, so there is no
            page to build the shell around.
    """
    config = config or BundleConfig()
    index = site.get_route("/")
    if index is None:
        raise MissingIndexRouteError(available=tuple(r.path for r in site.routes))

    document = render_shell(
        {
            "html_attrs": Markup(extract_html_attrs(index.html, lang=config.lang)),
            "body_attrs": Markup(extract_body_attrs(index.html)),
            "shims": Markup(RUNTIME_SHIMS_JS) if config.next_compat else "",
            "build_id": site.build_id,
            "meta": [Markup(tag) for tag in extract_meta(index.head)],
            "title": Markup(extract_title(index.head)),
            "css": Markup(escape_style(site.css)),
            "js": Markup(escape_script(site.js)),
            "mount_id": config.mount_id,
            "body": Markup(index.body),
            "router": Markup(escape_script(router_js)),
        }
    )
    return compact_html(document) if config.minify else document
