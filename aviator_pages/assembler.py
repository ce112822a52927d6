"""Assemble one page of the site into a host document.

The assembler picks the page named by the document's page selector, writes
the SEO sinks, then fills the root container with the header, every section
in schema order, and the footer. A section that raises is replaced by an
inline error block; only a missing schema or a missing root container stops
assembly altogether.

Example
-------
>>> from pathlib import Path
>>> from aviator_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> document = HostDocument.create("home")
>>> report = PageAssembler(site).assemble(document)  # doctest: +SKIP
>>> report.failures  # doctest: +SKIP
[]
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from ._constants import ROOT_CONTAINER_ID, SEO_DESCRIPTION_ID, SEO_TITLE_ID
from .config import DEFAULT_PAGE_KEY
from .dispatch import Rendered, RenderFailure, error_block, try_render
from .dom import Element, h
from .layout import render_footer, render_header
from .sections import SectionRegistry, default_registry
from .sections.static import Clock, utc_today

if typ.TYPE_CHECKING:
    from .config import PageConfig, SiteConfig

logger = logging.getLogger(__name__)

FALLBACK_TITLE = "Website"


class RenderEngineError(RuntimeError):
    """Raised when assembly cannot produce any page output."""


class SchemaMissingError(RenderEngineError):
    """Raised when no content schema was supplied."""


class RootContainerMissingError(RenderEngineError):
    """Raised when the host document has no root container."""


@dc.dataclass(slots=True)
class HostDocument:
    """The surrounding document the engine renders into.

    Attributes
    ----------
    page_key : str or None
        Page selector set by the host (``data-page`` on the body).
    root : Element or None
        Root container the page is appended to.
    seo_title : Element or None
        Optional ``<title>`` sink.
    seo_description : Element or None
        Optional ``<meta name="description">`` sink.
    """

    page_key: str | None = None
    root: Element | None = None
    seo_title: Element | None = None
    seo_description: Element | None = None

    @classmethod
    def create(cls, page_key: str | None) -> HostDocument:
        """Build the standard shell with a root container and both SEO sinks."""
        return cls(
            page_key=page_key,
            root=h("div", {"id": ROOT_CONTAINER_ID}),
            seo_title=h("title", {"id": SEO_TITLE_ID}),
            seo_description=h(
                "meta", {"id": SEO_DESCRIPTION_ID, "name": "description", "content": ""}
            ),
        )

    @property
    def title(self) -> str:
        return self.seo_title.text_content if self.seo_title is not None else ""

    @property
    def description(self) -> str:
        if self.seo_description is None:
            return ""
        return self.seo_description.get_attribute("content") or ""


@dc.dataclass(slots=True)
class AssemblyReport:
    """Outcome of assembling one page."""

    page_key: str
    page_found: bool = True
    rendered_sections: int = 0
    failures: list[RenderFailure] = dc.field(default_factory=list)
    unknown_types: list[str] = dc.field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.page_found and not self.failures


def page_not_found(page_key: str) -> Element:
    """Notice rendered in place of the page body when the key is undefined."""
    return h(
        "div",
        {"class": "page-not-found"},
        [
            h("h2", {}, "Page not found"),
            h("p", {}, f'data-page="{page_key}" not found in site pages'),
        ],
    )


class PageAssembler:
    """Render the page selected by a host document from an immutable schema."""

    def __init__(
        self,
        site: SiteConfig | None,
        *,
        registry: SectionRegistry | None = None,
        clock: Clock = utc_today,
        dev: bool = False,
    ) -> None:
        """Initialise the assembler.

        Parameters
        ----------
        site : SiteConfig or None
            Content schema. ``None`` is accepted here so the missing-schema
            failure surfaces from :meth:`assemble` with a clear diagnostic.
        registry : SectionRegistry, optional
            Section renderers; defaults to :func:`default_registry` sharing
            ``clock``.
        clock : Callable[[], date], optional
            Date source for ``{year}``/``{date}`` placeholders.
        dev : bool, optional
            Emit developer diagnostics through :mod:`logging`. Output is
            unaffected.
        """
        self.site = site
        self.clock = clock
        if registry is None:
            registry = default_registry(clock=clock)
        self.registry = registry
        self.dev = dev

    def assemble(self, document: HostDocument | None) -> AssemblyReport:
        """Render the selected page into ``document.root``.

        Raises
        ------
        SchemaMissingError
            If no content schema was supplied.
        RootContainerMissingError
            If the document has no root container.
        """
        if self.site is None:
            msg = "Content schema is missing; load the site config before rendering."
            logger.error(msg)
            raise SchemaMissingError(msg)
        if document is None or document.root is None:
            msg = f"Missing root container; the host document needs #{ROOT_CONTAINER_ID}."
            logger.error(msg)
            raise RootContainerMissingError(msg)

        page_key = document.page_key or DEFAULT_PAGE_KEY
        root = document.root
        page = self.site.get_page(page_key)
        if page is None:
            logger.error("Page '%s' not found in site pages", page_key)
            root.clear()
            root.append_child(page_not_found(page_key))
            return AssemblyReport(page_key=page_key, page_found=False)

        self._write_seo(document, page)
        report = AssemblyReport(
            page_key=page_key,
            unknown_types=self.registry.unknown_types(page.section_types),
        )
        self._log_diagnostics(report, page)

        root.clear()
        root.append_child(render_header(self.site))
        for descriptor in page.sections:
            match try_render(descriptor, self.registry):
                case Rendered(node=node):
                    root.append_child(node)
                    report.rendered_sections += 1
                case RenderFailure() as failure:
                    if self.dev:
                        logger.error(
                            "Error rendering section %s",
                            failure.section_type,
                            exc_info=failure.error,
                        )
                    root.append_child(error_block(failure))
                    report.failures.append(failure)
        root.append_child(render_footer(self.site, self.clock()))
        return report

    def _write_seo(self, document: HostDocument, page: PageConfig) -> None:
        if document.seo_title is not None:
            document.seo_title.text_content = (
                page.seo.title or self.site.brand.name or FALLBACK_TITLE
            )
        if document.seo_description is not None:
            document.seo_description.set_attribute("content", page.seo.description)

    def _log_diagnostics(self, report: AssemblyReport, page: PageConfig) -> None:
        if not self.dev:
            return
        logger.info("DEV: content schema present: %s", self.site is not None)
        logger.info("DEV: page key = %s", report.page_key)
        logger.info("DEV: sections count = %d", len(page.sections))
        if report.unknown_types:
            logger.warning("DEV: unknown section types: %s", report.unknown_types)


__all__ = [
    "AssemblyReport",
    "HostDocument",
    "PageAssembler",
    "RenderEngineError",
    "RootContainerMissingError",
    "SchemaMissingError",
    "page_not_found",
]
