"""Shared fixtures: an on-disk static export with five pages and assets."""

from pathlib import Path

import pytest

from sitepack.config import BundleConfig

FONT_BYTES = b"wOF2\x00\x01fake-font"
IMAGE_BYTES = b"\x89PNG\r\n\x1a\nfake-image"

APP_CSS = (
    '@font-face{font-family:Inter;src:url(../media/inter.woff2) format("woff2")}\n'
    ".logo{background:url(/images/logo.png) no-repeat}\n"
)
MAIN_JS = "window.__loaded = (window.__loaded || 0) + 1;\n"
MANIFEST_JS = "self.__BUILD_MANIFEST = {};\n"

HEAD = (
    '<meta charset="utf-8">'
    '<meta name="viewport" content="width=device-width">'
    "<title>{title}</title>"
    '<meta name="description" content="{title} page">'
    '<link rel="preload" href="/_next/static/media/inter.woff2" as="font" crossorigin="">'
    '<link rel="stylesheet" href="/_next/static/css/app.css">'
    "{extra}"
)


def page(title: str, body: str, *, extra_head: str = "", html_attrs: str = ' lang="en"') -> str:
    head = HEAD.format(title=title, extra=extra_head)
    return (
        f"<!DOCTYPE html><html{html_attrs}><head>{head}</head>"
        f'<body class="site"><main>{body}</main>'
        '<script src="/_next/static/chunks/main.js"></script>'
        "</body></html>"
    )


SITE_FILES: dict[str, str | bytes] = {
    "index.html": page(
        "Home",
        '<h1>Home</h1><a href="/about">About</a>'
        '<img src="/images/logo.png" alt="logo">',
    ),
    "about.html": page(
        "About",
        "<h1>About</h1><p>Who we are.</p>",
        extra_head="<style>.about{color:red}</style>",
    ),
    "blog/index.html": page(
        "Blog",
        '<h1>Blog</h1><a href="/blog/first-post">First post</a>',
        extra_head="<style>.about{color:red}</style>",
    ),
    "blog/first-post.html": page("First Post", "<h1>First post</h1><p>Hello.</p>"),
    "404.html": page("Not Found", "<h1>404</h1><p>Nothing here.</p>"),
    "_next/static/css/app.css": APP_CSS,
    "_next/static/chunks/main.js": MAIN_JS,
    "_next/static/abc123/_buildManifest.js": MANIFEST_JS,
    "_next/static/media/inter.woff2": FONT_BYTES,
    "images/logo.png": IMAGE_BYTES,
    "robots.txt": "User-agent: *\n",
}

ASSET_PATHS = (
    "/_next/static/css/app.css",
    "/_next/static/chunks/main.js",
    "/_next/static/abc123/_buildManifest.js",
    "/_next/static/media/inter.woff2",
    "/images/logo.png",
)

ROUTE_PATHS = ("/", "/404", "/about", "/blog", "/blog/first-post")


def write_site(root: Path, files: dict[str, str | bytes]) -> Path:
    for rel, content in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """A Next.js-style static export under ``tmp_path / "out"``."""
    return write_site(tmp_path / "out", SITE_FILES)


@pytest.fixture
def config(site_dir: Path, tmp_path: Path) -> BundleConfig:
    return BundleConfig(input_dir=site_dir, output_file=tmp_path / "dist" / "index.html")


@pytest.fixture
def asset_paths() -> tuple[str, ...]:
    return ASSET_PATHS


@pytest.fixture
def route_paths() -> tuple[str, ...]:
    return ROUTE_PATHS
