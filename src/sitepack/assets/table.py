"""AssetTable — logical path → data URI, built once per run."""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from sitepack.assets.encoding import to_data_uri
from sitepack.assets.types import AssetRecord
from sitepack.errors import DuplicateAssetError


class AssetTable(Mapping[str, str]):
    """Read-only mapping from logical path to encoded data URI.

    Iteration follows insertion order. Matching must go longest path
    first, so a short path (``/a.js``) can never claim text meant for a
    longer one ending in it (``/chunks/a.js``); :meth:`match_order`
    derives that order on demand.
    """

    __slots__ = ("_records", "_uris")

    def __init__(self, records: Iterable[AssetRecord] = ()) -> None:
        uris: dict[str, str] = {}
        by_path: dict[str, AssetRecord] = {}
        for record in records:
            if record.logical_path in uris:
                raise DuplicateAssetError(record.logical_path)
            uris[record.logical_path] = to_data_uri(record.payload, record.logical_path)
            by_path[record.logical_path] = record
        self._uris = MappingProxyType(uris)
        self._records = MappingProxyType(by_path)

    @classmethod
    def build(cls, records: Iterable[AssetRecord]) -> "AssetTable":
        return cls(records)

    def __getitem__(self, logical_path: str) -> str:
        return self._uris[logical_path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._uris)

    def __len__(self) -> int:
        return len(self._uris)

    def __repr__(self) -> str:
        return f"AssetTable({len(self)} assets)"

    def record(self, logical_path: str) -> AssetRecord:
        return self._records[logical_path]

    def match_order(self) -> list[AssetRecord]:
        """Records sorted by descending path length (stable on ties)."""
        return sorted(self._records.values(), key=lambda r: len(r.logical_path), reverse=True)

    def data_uris(self) -> Mapping[str, str]:
        return self._uris
