"""Single-file document composition."""

from sitepack.document.compact import compact_html, escape_script, escape_style
from sitepack.document.composer import compose_document, extract_meta

__all__ = [
    "compact_html",
    "compose_document",
    "escape_script",
    "escape_style",
    "extract_meta",
]
