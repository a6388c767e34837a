"""Route path canonicalization and the RouteRecord frozen dataclass."""

from dataclasses import dataclass


def canonicalize_path(path: str) -> str:
    """Return the canonical form of a route path.

    Adds a leading slash and strips trailing slashes. Root stays ``/``.

    Examples::

        canonicalize_path("/about/")  -> "/about"
        canonicalize_path("about")    -> "/about"
        canonicalize_path("")         -> "/"
        canonicalize_path("/")        -> "/"
    """
    if not path:
        return "/"
    if not path.startswith("/"):
        path = "/" + path
    stripped = path.rstrip("/")
    return stripped or "/"


@dataclass(frozen=True, slots=True)
class RouteRecord:
    """One page after reference rewriting, split into fragments.

    Attributes:
        path: Canonical route path.
        head: Inner markup of ``<head>`` (empty when the page has none).
        body: Inner markup of ``<body>`` (empty when the page has none).
        html: The full rewritten page, kept for the document shell.
    """

    path: str
    head: str
    body: str
    html: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", canonicalize_path(self.path))
