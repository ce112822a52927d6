"""Typed dataclasses describing the site content schema."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ
from pathlib import Path
from types import MappingProxyType

DEFAULT_PAGE_KEY = "home"


class SiteConfigError(ValueError):
    """Raised when the content schema file cannot be read as a site."""


@dc.dataclass(frozen=True, slots=True)
class Brand:
    """Brand identity shown in the header and footer."""

    name: str = "Brand"
    tagline: str = ""


@dc.dataclass(frozen=True, slots=True)
class NavLink:
    """Navigation or footer hyperlink."""

    label: str = "Link"
    href: str = "#"


@dc.dataclass(frozen=True, slots=True)
class LinkButton:
    """Call-to-action link styled as a button."""

    label: str = "CTA"
    href: str = "#"
    variant: str = "primary"


DEFAULT_HEADER_CTA = LinkButton(label="Request", href="contact.html")


@dc.dataclass(frozen=True, slots=True)
class HeaderConfig:
    """Header call-to-action and navigation links."""

    cta: LinkButton = DEFAULT_HEADER_CTA
    nav: tuple[NavLink, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class FooterConfig:
    """Footer links and the copyright template.

    ``copyright`` may contain ``{year}`` and ``{date}`` placeholders, filled in
    at render time.
    """

    links: tuple[NavLink, ...] = ()
    copyright: str = ""


@dc.dataclass(frozen=True, slots=True)
class SeoConfig:
    """Per-page document title and meta description."""

    title: str = ""
    description: str = ""


@dc.dataclass(frozen=True, slots=True)
class SectionDescriptor:
    """One typed section instance within a page.

    Attributes
    ----------
    type : str
        Registry key selecting the renderer (for example ``"hero.v1"``).
    data : Mapping[str, Any]
        Renderer-specific payload; read-only.
    id : str or None
        Optional DOM id used for in-page anchors.
    """

    type: str
    data: cabc.Mapping[str, typ.Any] = dc.field(
        default_factory=lambda: MappingProxyType({})
    )
    id: str | None = None


@dc.dataclass(frozen=True, slots=True)
class PageConfig:
    """A page: SEO metadata plus its ordered sections."""

    key: str
    seo: SeoConfig
    sections: tuple[SectionDescriptor | None, ...]
    output: str

    @property
    def section_types(self) -> list[str]:
        return [section.type for section in self.sections if section is not None]


@dc.dataclass(frozen=True, slots=True)
class BuildDefaults:
    """Static build settings shared by every page."""

    output_dir: Path = Path("public")
    stylesheet: str = "styles.css"
    lang: str = "en"


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """The complete, immutable content schema."""

    brand: Brand
    header: HeaderConfig
    footer: FooterConfig
    pages: cabc.Mapping[str, PageConfig]
    build: BuildDefaults = BuildDefaults()

    def get_page(self, page_key: str | None) -> PageConfig | None:
        """Return the page for ``page_key`` or ``None`` when it is not defined."""
        if page_key is None:
            return None
        return self.pages.get(page_key)


__all__ = [
    "DEFAULT_HEADER_CTA",
    "DEFAULT_PAGE_KEY",
    "Brand",
    "BuildDefaults",
    "FooterConfig",
    "HeaderConfig",
    "LinkButton",
    "NavLink",
    "PageConfig",
    "SectionDescriptor",
    "SeoConfig",
    "SiteConfig",
    "SiteConfigError",
]
