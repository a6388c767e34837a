"""Asset encoding and reference rewriting.

Builds the asset table (logical path → data URI) and rewrites every
reference to those assets in stylesheets, scripts, and pages::

    from sitepack.assets import AssetTable, rewrite

    table = AssetTable.build(records)
    css = rewrite(css, table)
"""

from sitepack.assets.encoding import to_data_uri
from sitepack.assets.inline import InlinedSite, inline_site
from sitepack.assets.mime import mime_for
from sitepack.assets.rewrite import rewrite
from sitepack.assets.table import AssetTable
from sitepack.assets.types import AssetRecord, MimeKind

__all__ = [
    "AssetRecord",
    "AssetTable",
    "InlinedSite",
    "MimeKind",
    "inline_site",
    "mime_for",
    "rewrite",
    "to_data_uri",
]
