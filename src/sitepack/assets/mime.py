"""Fixed extension → mime table for data URIs.

The table is deliberately closed: the same input must always produce the
same document, independent of the platform's ``mimetypes`` registry.
"""

from sitepack.assets.types import MimeKind

DEFAULT_MIME = "application/octet-stream"

MIME_TYPES: dict[str, str] = {
    # Images
    "svg": "image/svg+xml",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "webp": "image/webp",
    "avif": "image/avif",
    "ico": "image/x-icon",
    # Fonts
    "woff2": "font/woff2",
    "woff": "font/woff",
    "ttf": "font/ttf",
    "otf": "font/otf",
    "eot": "application/vnd.ms-fontobject",
    # Code
    "js": "application/javascript",
    "mjs": "application/javascript",
    "css": "text/css",
}

_KINDS: dict[str, MimeKind] = {
    "font": MimeKind.FONT,
    "image": MimeKind.IMAGE,
    "text/css": MimeKind.STYLE,
    "application/javascript": MimeKind.SCRIPT,
    "application/vnd.ms-fontobject": MimeKind.FONT,
}


def extension_of(path: str) -> str:
    """Lower-cased extension without the dot, ``""`` when there is none."""
    name = path.rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[-1].lower()


def mime_for(path: str) -> str:
    """Return the mime type for *path*, falling back to ``application/octet-stream``."""
    return MIME_TYPES.get(extension_of(path), DEFAULT_MIME)


def kind_for(path: str) -> MimeKind:
    mime = mime_for(path)
    if mime in _KINDS:
        return _KINDS[mime]
    return _KINDS.get(mime.split("/", 1)[0], MimeKind.BINARY)
