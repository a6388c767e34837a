"""Reference rewriting — replace asset references with data URIs.

Works on any text: markup, stylesheets, minified script bundles. For each
asset, longest logical path first, three reference shapes are tried:

**Absolute**: the logical path itself, optionally behind a scheme and
host and optionally followed by a query string::

    "/_next/static/media/font.woff2"
    url(https://example.com/_next/static/media/font.woff2?v=3)

**Rootless**: the same path without its leading slash::

    "_next/static/media/font.woff2"

**Segment**: for assets stored directly in a known asset directory
(``media``, ``chunks``, ``css``, ``styles``), ``<segment>/<filename>``
optionally behind ``./``, ``../`` or the static prefix::

    url(../media/font.woff2)
    "static/chunks/app.js"   (no match: ``/`` is not a delimiter)

A reference only counts when it sits between delimiters: before it one of
``" ' (`` whitespace or ``,``, after it one of ``" ' )`` whitespace or
``,``, optionally escaped with one backslash (``\\"`` inside a script
string literal). The segment shape does not treat ``,`` as a delimiter.

Delimiters are checked but never consumed, and only the reference itself
is replaced, so the surrounding quoting is untouched and two references
sharing one delimiter are both found. Matching is a two-phase scan:
``str.find`` locates candidates, then the boundaries are validated. Once
a reference is replaced it is a data URI, which no later (shorter)
candidate can match again.

The rewriter never raises: anything that does not validate is left as-is.
"""

import re
from collections.abc import Sequence

from sitepack.assets.table import AssetTable
from sitepack.assets.types import AssetRecord

DEFAULT_STATIC_PREFIX = "/_next/static/"
DEFAULT_ASSET_SEGMENTS: tuple[str, ...] = ("media", "chunks", "css", "styles")

_QUOTES = "\"'"
_OPENERS = _QUOTES + "("
_CLOSERS = _QUOTES + ")"

# Scheme + host immediately before an absolute path; searched with endpos
# set to the path start, so \Z anchors it there.
_HOST_RE = re.compile(r"https?://[^/\s\"'(),\\]+\Z")
_HOST_WINDOW = 256


def _is_open(ch: str, *, allow_comma: bool) -> bool:
    return ch in _OPENERS or ch.isspace() or (allow_comma and ch == ",")


def _is_close(ch: str, *, allow_comma: bool) -> bool:
    return ch in _CLOSERS or ch.isspace() or (allow_comma and ch == ",")


def _ends_query(ch: str, *, allow_comma: bool) -> bool:
    return ch == "\\" or _is_close(ch, allow_comma=allow_comma)


def _closes_at(text: str, index: int, *, allow_comma: bool) -> bool:
    if index >= len(text):
        return False
    ch = text[index]
    if ch == "\\":
        return index + 1 < len(text) and _is_close(text[index + 1], allow_comma=allow_comma)
    return _is_close(ch, allow_comma=allow_comma)


def _match_at(
    text: str,
    pos: int,
    needle: str,
    *,
    prefixes: Sequence[str],
    host: bool,
    allow_comma: bool,
) -> tuple[int, int] | None:
    """Validate a candidate at *pos* and return the span to replace."""
    start = pos
    if host:
        found = _HOST_RE.search(text, max(0, pos - _HOST_WINDOW), pos)
        if found is not None:
            start = found.start()
    for prefix in prefixes:
        if prefix and pos >= len(prefix) and text.startswith(prefix, pos - len(prefix)):
            start = pos - len(prefix)
            break

    if start == 0 or not _is_open(text[start - 1], allow_comma=allow_comma):
        return None

    end = pos + len(needle)
    if end < len(text) and text[end] == "?":
        query_end = end + 1
        while query_end < len(text) and not _ends_query(text[query_end], allow_comma=allow_comma):
            query_end += 1
        if query_end > end + 1:
            end = query_end

    if not _closes_at(text, end, allow_comma=allow_comma):
        return None
    return start, end


def _replace_shape(
    text: str,
    needle: str,
    data_uri: str,
    *,
    prefixes: Sequence[str] = (),
    host: bool = False,
    allow_comma: bool = True,
) -> str:
    if not needle or needle not in text:
        return text

    pieces: list[str] = []
    last = 0
    pos = text.find(needle)
    while pos != -1:
        span = _match_at(text, pos, needle, prefixes=prefixes, host=host, allow_comma=allow_comma)
        if span is None or span[0] < last:
            pos = text.find(needle, pos + 1)
            continue
        start, end = span
        pieces.append(text[last:start])
        pieces.append(data_uri)
        last = end
        pos = text.find(needle, end)

    if not pieces:
        return text
    pieces.append(text[last:])
    return "".join(pieces)


def rewrite_record(
    text: str,
    record: AssetRecord,
    data_uri: str,
    *,
    static_prefix: str = DEFAULT_STATIC_PREFIX,
    asset_segments: Sequence[str] = DEFAULT_ASSET_SEGMENTS,
) -> str:
    """Replace every recognised reference to one asset in *text*."""
    path = record.logical_path
    rooted = path.startswith("/")

    text = _replace_shape(text, path, data_uri, host=rooted)
    if rooted:
        text = _replace_shape(text, path[1:], data_uri)

    segment = record.parent_segment
    if segment is not None and segment in asset_segments:
        text = _replace_shape(
            text,
            f"{segment}/{record.filename}",
            data_uri,
            prefixes=(static_prefix, "../", "./"),
            allow_comma=False,
        )
    return text


def rewrite(
    text: str,
    table: AssetTable,
    *,
    static_prefix: str = DEFAULT_STATIC_PREFIX,
    asset_segments: Sequence[str] = DEFAULT_ASSET_SEGMENTS,
) -> str:
    """Replace references to every asset in *table* with its data URI.

    Pure: returns the rewritten text and leaves *table* untouched. Text
    without references comes back unchanged, and running the pass again
    over its own output changes nothing.
    """
    if not text or not table:
        return text
    for record in table.match_order():
        text = rewrite_record(
            text,
            record,
            table[record.logical_path],
            static_prefix=static_prefix,
            asset_segments=asset_segments,
        )
    return text
