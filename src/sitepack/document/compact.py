"""Whitespace compaction and inline-block escaping for the final document.

Compaction drops HTML comments and collapses whitespace between and
inside tags, but never touches the contents of ``<script>``, ``<style>``,
``<pre>`` or ``<textarea>``: collapsing a newline inside a script would
fold the next line into a ``//`` comment.
"""

import re

_PROTECTED_RE = re.compile(
    r"(<(script|style|pre|textarea)\b[^>]*>[\s\S]*?</\2\s*>)",
    re.IGNORECASE,
)
_COMMENT_RE = re.compile(r"<!--[\s\S]*?-->")
_BETWEEN_TAGS_RE = re.compile(r">\s+<")
_RUNS_RE = re.compile(r"\s{2,}")
_TRAILING_RE = re.compile(r"(?:^|(?<=>))\s+\Z")
_LEADING_RE = re.compile(r"^\s+(?=<|\Z)")

_SCRIPT_CLOSE_RE = re.compile(r"</(script)", re.IGNORECASE)
_STYLE_CLOSE_RE = re.compile(r"</(style)", re.IGNORECASE)


def escape_script(js: str) -> str:
    """Keep *js* from closing its ``<script>`` block early."""
    return _SCRIPT_CLOSE_RE.sub(r"<\\/\1", js)


def escape_style(css: str) -> str:
    """Keep *css* from closing its ``<style>`` block early."""
    return _STYLE_CLOSE_RE.sub(r"<\\/\1", css)


def _compact_markup(text: str) -> str:
    text = _COMMENT_RE.sub("", text)
    text = _BETWEEN_TAGS_RE.sub("><", text)
    return _RUNS_RE.sub(" ", text)


def compact_html(html: str) -> str:
    """Compact *html* outside protected blocks.

    Examples::

        compact_html("<ul>  <li>a   b</li>  </ul>")  -> "<ul><li>a b</li></ul>"
        compact_html("<!-- note --><p>x</p>")      -> "<p>x</p>"
    """
    parts = _PROTECTED_RE.split(html)
    # split() with two groups yields [text, block, tag, text, block, tag, ..., text]
    out: list[str] = []
    count = len(parts)
    for index in range(0, count, 3):
        text = _compact_markup(parts[index])
        if index > 0:
            text = _LEADING_RE.sub("", text)
        if index + 1 < count:
            text = _TRAILING_RE.sub("", text)
        out.append(text)
        if index + 1 < count:
            out.append(parts[index + 1])
    return "".join(out).strip()
