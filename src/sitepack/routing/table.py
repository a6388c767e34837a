"""The route table embedded in a generated document.

Maps canonical route paths to their head/body fragments. Serialized as
UTF-8 JSON of the shape ``{"/about": {"head": "...", "body": "..."}}``
and then base64-encoded, so the payload holds no quote, ``<`` or
newline and cannot terminate the script that carries it.

The encoded table is assigned to a fixed identifier inside the router
script::

    const ROUTE_MAP_BASE64 = "eyIvIjogey...";

:func:`extract_route_table` recovers the table from a finished document
without executing it.
"""

import base64
import binascii
import json
import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from sitepack.errors import RouteTableDecodeError
from sitepack.routing.route import RouteRecord, canonicalize_path

ROUTE_MAP_IDENTIFIER = "ROUTE_MAP_BASE64"

_EMBEDDED_RE = re.compile(ROUTE_MAP_IDENTIFIER + r'\s*=\s*"([^"]*)"')
_TITLE_RE = re.compile(r"<title[^>]*>([\s\S]*?)</title>", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """Head and body fragments of one route."""

    head: str
    body: str

    @property
    def title(self) -> str | None:
        """Raw ``<title>`` text from the head fragment, if any."""
        match = _TITLE_RE.search(self.head)
        return match.group(1) if match else None


class RouteTable(Mapping[str, RouteEntry]):
    """Read-only ordered mapping of canonical path to :class:`RouteEntry`.

    Keys are canonicalized on the way in, and lookups canonicalize too,
    so ``table["/about/"]`` finds the ``/about`` entry. When two records
    canonicalize to one path the first one wins.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, RouteEntry] | None = None) -> None:
        built: dict[str, RouteEntry] = {}
        for path, entry in (entries or {}).items():
            built.setdefault(canonicalize_path(path), entry)
        self._entries = MappingProxyType(built)

    @classmethod
    def from_records(cls, records: Iterable[RouteRecord]) -> "RouteTable":
        entries: dict[str, RouteEntry] = {}
        for record in records:
            entries.setdefault(record.path, RouteEntry(head=record.head, body=record.body))
        return cls(entries)

    def __getitem__(self, path: str) -> RouteEntry:
        return self._entries[canonicalize_path(path)]

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and canonicalize_path(path) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RouteTable({list(self._entries)!r})"

    def to_json(self) -> str:
        payload = {path: {"head": e.head, "body": e.body} for path, e in self._entries.items()}
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))

    def encode(self) -> str:
        """Return the base64 text embedded in the document."""
        return base64.b64encode(self.to_json().encode("utf-8")).decode("ascii")


def decode_route_table(encoded: str) -> RouteTable:
    """Decode the embedded base64 JSON form back into a :class:`RouteTable`.

    Raises:
        RouteTableDecodeError: The text is not base64, not UTF-8, not
            JSON, or not a mapping of ``{"head", "body"}`` objects.
    """
    try:
        raw = base64.b64decode(encoded, validate=True).decode("utf-8")
        data = json.loads(raw)
    except (binascii.Error, UnicodeDecodeError, ValueError) as exc:
        raise RouteTableDecodeError(f"Cannot decode route table: {exc}") from exc

    if not isinstance(data, dict):
        raise RouteTableDecodeError("Route table must be a JSON object")

    entries: dict[str, RouteEntry] = {}
    for path, value in data.items():
        if not isinstance(value, dict):
            raise RouteTableDecodeError(f"Route {path!r} is not an object")
        entries[path] = RouteEntry(head=str(value.get("head", "")), body=str(value.get("body", "")))
    return RouteTable(entries)


def find_encoded_route_table(document: str) -> str | None:
    """Return the raw base64 payload assigned to ``ROUTE_MAP_BASE64``, if any."""
    match = _EMBEDDED_RE.search(document)
    return match.group(1) if match else None


def extract_route_table(document: str) -> RouteTable:
    """Find and decode the route table inside a generated document.

    Raises:
        RouteTableDecodeError: No ``ROUTE_MAP_BASE64`` assignment is
            present, or its payload does not decode.
    """
    encoded = find_encoded_route_table(document)
    if encoded is None:
        raise RouteTableDecodeError(f"No {ROUTE_MAP_IDENTIFIER} assignment found in document")
    return decode_route_table(encoded)
