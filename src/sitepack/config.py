"""Bundle configuration.

Every knob of the pipeline lives on one frozen dataclass, passed explicitly
from the CLI or the caller down to each stage.
"""

import re
from dataclasses import dataclass
from pathlib import Path

from sitepack.errors import ConfigurationError

_IDENT_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_EVENT_RE = re.compile(r"^[A-Za-z0-9_:.\-]+$")


@dataclass(frozen=True, slots=True)
class BundleConfig:
    """Bundle configuration. Immutable after creation.

    All fields have sensible defaults for a Next.js static export. Override
    what you need::

        config = BundleConfig(input_dir="build", mount_id="root", next_compat=False)
    """

    # Input / output
    input_dir: str | Path = "out"
    output_file: str | Path = "dist/index.html"

    # Reference rewriting
    static_prefix: str = "/_next/static/"
    asset_segments: tuple[str, ...] = ("media", "chunks", "css", "styles")
    strip_preloads: bool = True

    # Navigation runtime
    mount_id: str = "__next"
    not_found_routes: tuple[str, ...] = ("/404", "/_not-found")
    router_global: str = "__SITEPACK_ROUTER__"
    route_change_event: str = "sitepack:route-change"

    # Document shell
    lang: str = "en"
    minify: bool = True
    next_compat: bool = True  # __NEXT_DATA__ stub + currentScript shims

    def __post_init__(self) -> None:
        if not _IDENT_RE.match(self.router_global):
            raise ConfigurationError(
                f"router_global must be a JavaScript identifier, got {self.router_global!r}"
            )
        if not self.mount_id or any(c in self.mount_id for c in "\"'<> \t\n"):
            raise ConfigurationError(f"mount_id must be a plain element id, got {self.mount_id!r}")
        if not _EVENT_RE.match(self.route_change_event):
            raise ConfigurationError(
                f"route_change_event contains unsupported characters: {self.route_change_event!r}"
            )
        if not (self.static_prefix.startswith("/") and self.static_prefix.endswith("/")):
            raise ConfigurationError(
                f"static_prefix must start and end with '/', got {self.static_prefix!r}"
            )
        for segment in self.asset_segments:
            if not segment or "/" in segment:
                raise ConfigurationError(f"asset segment must be a single path part: {segment!r}")
        for path in self.not_found_routes:
            if not path.startswith("/"):
                raise ConfigurationError(f"not_found_routes entries must start with '/': {path!r}")
