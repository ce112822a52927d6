"""Static site rendering pipeline.

This module turns the content schema in ``config/site.yaml`` into one HTML
file per page. For each page key it creates a :class:`HostDocument`, lets the
:class:`PageAssembler` fill it, and wraps the result in the ``page.jinja``
shell. A small JSON metadata file records which file each page was written to
and which sections failed.

Typical usage mirrors the build pipeline:

>>> from pathlib import Path
>>> from aviator_pages.config import load_site_config
>>> builder = SiteBuilder(load_site_config(Path("config/site.yaml")))
>>> written = builder.run()  # doctest: +SKIP
>>> print(written[0])  # doctest: +SKIP
public/index.html

The builder expects templates to reside under ``aviator_pages/templates``
unless a custom directory is provided. It relies on Jinja2 with autoescape
enabled and produces UTF-8 encoded files.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import json
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from ._constants import BUILD_META_FILENAME
from .assembler import AssemblyReport, HostDocument, PageAssembler
from .sections.static import Clock, utc_today

if typ.TYPE_CHECKING:
    from .config import SiteConfig
    from .sections import SectionRegistry


@dc.dataclass(slots=True)
class BuiltPage:
    """A rendered page and where it was written."""

    key: str
    path: Path
    report: AssemblyReport


class SiteBuilder:
    """Render every page of the content schema to static HTML."""

    def __init__(
        self,
        site: SiteConfig,
        *,
        output_dir: Path | None = None,
        templates_dir: Path | None = None,
        registry: SectionRegistry | None = None,
        clock: Clock = utc_today,
        dev: bool = False,
    ) -> None:
        """Initialize the builder, the page assembler, and the Jinja environment.

        Parameters
        ----------
        site : SiteConfig
            Parsed content schema.
        output_dir : Path, optional
            Destination folder; defaults to ``site.build.output_dir``.
        templates_dir : Path, optional
            Directory containing ``page.jinja``. Defaults to
            ``aviator_pages/templates``.
        registry : SectionRegistry, optional
            Section renderers passed to the assembler.
        clock : Callable[[], date], optional
            Date source for copyright and legal placeholders.
        dev : bool, optional
            Enable developer diagnostics in the assembler.
        """
        self.site = site
        self.output_dir = output_dir or site.build.output_dir
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.assembler = PageAssembler(site, registry=registry, clock=clock, dev=dev)
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("page.jinja")

    def render_page(self, page_key: str) -> tuple[str, AssemblyReport]:
        """Assemble ``page_key`` and return the full HTML document."""
        document = HostDocument.create(page_key)
        report = self.assembler.assemble(document)
        root = document.root
        context = {
            "lang": self.site.build.lang,
            "stylesheet": self.site.build.stylesheet,
            "page_key": report.page_key,
            "title": document.title,
            "description": document.description,
            "root_html": Markup(root.to_html() if root is not None else ""),
            "generated_at": dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html, report

    def build_page(self, page_key: str) -> BuiltPage:
        """Render and write one page, returning its output path and report."""
        page = self.site.get_page(page_key)
        filename = page.output if page is not None else f"{page_key}.html"
        html, report = self.render_page(page_key)
        output_path = self.output_dir / filename
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        return BuiltPage(key=page_key, path=output_path, report=report)

    def run(self, pages: typ.Iterable[str] | None = None) -> list[BuiltPage]:
        """Render the requested pages (all pages by default) and record metadata.

        Notes
        -----
        Filesystem errors while writing pages propagate; a failure to write the
        metadata file is ignored.
        """
        keys = list(pages) if pages is not None else list(self.site.pages)
        built = [self.build_page(key) for key in keys]
        self._write_metadata(built)
        return built

    def _write_metadata(self, built: list[BuiltPage]) -> None:
        """Persist which file each page went to and any failed sections."""
        metadata = {
            "pages": {page.key: page.path.name for page in built},
            "failures": {
                page.key: [
                    {"type": failure.section_type, "message": failure.message}
                    for failure in page.report.failures
                ]
                for page in built
                if page.report.failures
            },
            "unknown_types": sorted(
                {kind for page in built for kind in page.report.unknown_types}
            ),
        }
        path = self.output_dir / BUILD_META_FILENAME
        try:
            path.write_text(json.dumps(metadata, indent=2), encoding="utf-8")
        except OSError:  # pragma: no cover - IO issues
            return


__all__ = ["BuiltPage", "SiteBuilder"]
