"""Asset records — the join key between source files and references."""

from dataclasses import dataclass
from enum import Enum


class MimeKind(Enum):
    """Coarse asset category, decided by file extension."""

    FONT = "font"
    IMAGE = "image"
    STYLE = "style"
    SCRIPT = "script"
    BINARY = "binary"


@dataclass(frozen=True, slots=True)
class AssetRecord:
    """One non-page file of the site.

    Attributes:
        logical_path: Root-relative path with a leading slash, exactly as
            pages and bundles refer to it (``/_next/static/media/a.woff2``).
        kind: Asset category.
        payload: Raw bytes for binary assets, text for stylesheets and
            scripts.
    """

    logical_path: str
    kind: MimeKind
    payload: bytes | str

    @property
    def filename(self) -> str:
        return self.logical_path.rsplit("/", 1)[-1]

    @property
    def parent_segment(self) -> str | None:
        """Name of the directory holding the file, ``None`` at the root."""
        parts = self.logical_path.strip("/").split("/")
        return parts[-2] if len(parts) >= 2 else None
