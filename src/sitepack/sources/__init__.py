"""Reading pre-rendered site output from disk."""

from sitepack.sources.reader import html_path_to_route, read_site
from sitepack.sources.types import SiteSource, SourceRoute

__all__ = [
    "SiteSource",
    "SourceRoute",
    "html_path_to_route",
    "read_site",
]
