"""Sitepack exception hierarchy.

Shared across the source reader, the asset pipeline, the composer, and
the CLI so every module raises and catches the same types.
"""

from dataclasses import dataclass


class SitepackError(Exception):
    """Base for all sitepack-specific errors."""


class ConfigurationError(SitepackError):
    """Raised when bundle configuration is invalid.

    Typically raised from ``BundleConfig.__post_init__``.
    """


class SourceError(SitepackError):
    """Raised when the input directory cannot be read as site output."""


class DuplicateAssetError(SitepackError):
    """Two asset records share one logical path."""

    def __init__(self, logical_path: str) -> None:
        self.logical_path = logical_path
        super().__init__(f"Duplicate asset path: {logical_path}")


@dataclass(frozen=True, slots=True)
class MissingIndexRouteError(SitepackError):
    """No ``/`` route was found, so there is no shell to build around.

    The only fatal condition of generation. Carries the routes that
    *were* found so the message points at the likely cause (an input
    directory one level too deep, a missing ``index.html``).
    """

    available: tuple[str, ...] = ()

    def __str__(self) -> str:
        if self.available:
            return f"No index route '/' found. Available routes: {', '.join(self.available)}"
        return "No index route '/' found (no pages in input)"


class RouteTableDecodeError(SitepackError):
    """The embedded route table is missing or cannot be decoded."""
