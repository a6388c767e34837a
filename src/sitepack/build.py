"""Build pipeline — read, inline, generate, compose, write.

::

    from sitepack import BundleConfig, build_bundle

    result = build_bundle(BundleConfig(input_dir="out", output_file="dist/index.html"))
    print(result.routes, result.size)
"""

import logging
import time
from dataclasses import dataclass, replace
from pathlib import Path

from sitepack.assets.inline import InlinedSite, inline_site
from sitepack.config import BundleConfig
from sitepack.document.composer import compose_document
from sitepack.errors import MissingIndexRouteError
from sitepack.navigation.generator import build_route_table, generate
from sitepack.routing.table import RouteTable
from sitepack.sources.reader import read_site
from sitepack.sources.types import SiteSource

logger = logging.getLogger("sitepack.build")


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Everything a build produced.

    Attributes:
        document: The single-file HTML document.
        site: Rewritten routes, stylesheet and script bundle.
        routes: The route table embedded in the document.
        router_js: Generated navigation runtime source.
        output_file: Where the document was written, ``None`` for
            in-memory builds.
        duration: Wall-clock seconds spent in the pipeline.
    """

    document: str
    site: InlinedSite
    routes: RouteTable
    router_js: str
    output_file: Path | None = None
    duration: float = 0.0

    @property
    def size(self) -> int:
        """Document size in bytes (UTF-8)."""
        return len(self.document.encode("utf-8"))


def bundle_site(source: SiteSource, config: BundleConfig | None = None) -> BuildResult:
    """Run the in-memory pipeline over an already-read site.

    Raises:
        MissingIndexRouteError: The site has no ``/`` route.
    """
    config = config or BundleConfig()
    started = time.perf_counter()

    if source.get_route("/") is None:
        raise MissingIndexRouteError(available=source.route_paths())

    logger.info("Inlining assets")
    site = inline_site(source, config)

    logger.info("Generating navigation runtime for %d routes", len(site.routes))
    routes = build_route_table(site.routes)
    router_js = generate(routes, config, build_id=site.build_id)

    logger.info("Composing document")
    document = compose_document(site, router_js, config)

    return BuildResult(
        document=document,
        site=site,
        routes=routes,
        router_js=router_js,
        duration=time.perf_counter() - started,
    )


def write_document(path: Path, document: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(document)


def build_bundle(config: BundleConfig | None = None) -> BuildResult:
    """Read ``config.input_dir``, bundle it, and write ``config.output_file``."""
    config = config or BundleConfig()
    started = time.perf_counter()

    logger.info("Reading site output from %s", config.input_dir)
    source = read_site(config)
    logger.info("Found %d routes: %s", len(source.routes), ", ".join(source.route_paths()))

    result = bundle_site(source, config)

    output_file = Path(config.output_file)
    write_document(output_file, result.document)
    duration = time.perf_counter() - started
    logger.info("Wrote %s (%.1f KB) in %.2fs", output_file, result.size / 1024, duration)

    return replace(result, output_file=output_file, duration=duration)
