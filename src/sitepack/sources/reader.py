"""Filesystem reader for pre-rendered site output.

Walks the input directory and classifies every file by extension:

- ``.html`` files become routes (``about.html`` and ``about/index.html``
  both map to ``/about``; ``index.html`` maps to ``/``)
- ``.css`` and ``.js`` files are read as text
- fonts and images are read as bytes
- everything else is skipped

The build identifier is the first directory under the static prefix that
is not one of the known asset segments (Next.js writes
``_next/static/<buildId>/``).
"""

import logging
from pathlib import Path, PurePosixPath

from sitepack.config import BundleConfig
from sitepack.errors import SourceError
from sitepack.routing.route import canonicalize_path
from sitepack.sources.types import SiteSource, SourceRoute

logger = logging.getLogger("sitepack.sources")

PAGE_EXTENSIONS = frozenset({".html"})
STYLE_EXTENSIONS = frozenset({".css"})
SCRIPT_EXTENSIONS = frozenset({".js", ".mjs"})
FONT_EXTENSIONS = frozenset({".woff2", ".woff", ".ttf", ".otf", ".eot"})
IMAGE_EXTENSIONS = frozenset({".svg", ".png", ".jpg", ".jpeg", ".gif", ".webp", ".ico", ".avif"})

UNKNOWN_BUILD_ID = "unknown"


def html_path_to_route(rel_path: str) -> str:
    """Map a root-relative ``.html`` file path to its route path.

    Examples::

        "index.html"            -> "/"
        "about.html"            -> "/about"
        "blog/index.html"       -> "/blog"
        "blog/first-post.html"  -> "/blog/first-post"
    """
    parts = PurePosixPath(rel_path.replace("\\", "/")).with_suffix("").parts
    if parts and parts[-1] == "index":
        parts = parts[:-1]
    return canonicalize_path("/" + "/".join(parts))


def find_build_id(root: Path, config: BundleConfig) -> str:
    """Return the build directory name under the static prefix, or ``unknown``."""
    static_dir = root / config.static_prefix.strip("/")
    if not static_dir.is_dir():
        return UNKNOWN_BUILD_ID
    skip = set(config.asset_segments)
    for item in sorted(static_dir.iterdir()):
        if item.is_dir() and not item.name.startswith(".") and item.name not in skip:
            return item.name
    return UNKNOWN_BUILD_ID


def _walk_files(root: Path) -> list[Path]:
    files = []
    for path in root.rglob("*"):
        rel_parts = path.relative_to(root).parts
        if any(part.startswith(".") for part in rel_parts):
            continue
        if path.is_file():
            files.append(path)
    return sorted(files, key=lambda p: p.relative_to(root).as_posix())


def _read_text(path: Path, rel: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SourceError(f"{rel} is not valid UTF-8: {exc}") from exc


def read_site(config: BundleConfig | None = None, input_dir: str | Path | None = None) -> SiteSource:
    """Walk a site directory and return its routes and asset payloads.

    Args:
        config: Bundle configuration (static prefix, asset segments).
        input_dir: Overrides ``config.input_dir``.

    Raises:
        SourceError: The directory does not exist, or a text file is not
            valid UTF-8.
    """
    config = config or BundleConfig()
    root = Path(input_dir if input_dir is not None else config.input_dir)
    if not root.is_dir():
        raise SourceError(f"Input directory not found: {root}")
    root = root.resolve()

    routes: list[SourceRoute] = []
    seen_routes: dict[str, str] = {}
    css_files: dict[str, str] = {}
    js_files: dict[str, str] = {}
    font_files: dict[str, bytes] = {}
    image_files: dict[str, bytes] = {}

    for path in _walk_files(root):
        rel = path.relative_to(root).as_posix()
        logical_path = "/" + rel
        ext = path.suffix.lower()

        if ext in PAGE_EXTENSIONS:
            route_path = html_path_to_route(rel)
            if route_path in seen_routes:
                logger.warning(
                    "Route %s already provided by %s; ignoring %s",
                    route_path,
                    seen_routes[route_path],
                    rel,
                )
                continue
            seen_routes[route_path] = rel
            routes.append(SourceRoute(path=route_path, html_file=rel, html=_read_text(path, rel)))
        elif ext in STYLE_EXTENSIONS:
            css_files[logical_path] = _read_text(path, rel)
        elif ext in SCRIPT_EXTENSIONS:
            js_files[logical_path] = _read_text(path, rel)
        elif ext in FONT_EXTENSIONS:
            font_files[logical_path] = path.read_bytes()
        elif ext in IMAGE_EXTENSIONS:
            image_files[logical_path] = path.read_bytes()
        else:
            logger.debug("Skipping %s (unhandled extension)", rel)
            continue
        logger.debug("Read %s", rel)

    build_id = find_build_id(root, config)
    logger.info(
        "Read %d routes, %d stylesheets, %d scripts, %d fonts, %d images from %s",
        len(routes),
        len(css_files),
        len(js_files),
        len(font_files),
        len(image_files),
        root,
    )
    return SiteSource(
        build_id=build_id,
        routes=tuple(routes),
        css_files=css_files,
        js_files=js_files,
        font_files=font_files,
        image_files=image_files,
    )
