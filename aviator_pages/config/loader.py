"""Load the site content schema YAML into immutable dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path
from types import MappingProxyType

from ruamel.yaml import YAML

from .helpers import _as_list, _as_mapping, _freeze, _optional_str, _text
from .models import (
    DEFAULT_HEADER_CTA,
    DEFAULT_PAGE_KEY,
    Brand,
    BuildDefaults,
    FooterConfig,
    HeaderConfig,
    LinkButton,
    NavLink,
    PageConfig,
    SectionDescriptor,
    SeoConfig,
    SiteConfig,
    SiteConfigError,
)


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML content schema describing brand, chrome, and pages.

    Parameters
    ----------
    path : Path
        Filesystem path to the schema file (for example ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Immutable content schema. Missing or malformed fields are replaced by
        defaults rather than rejected.

    Raises
    ------
    FileNotFoundError
        If the schema file does not exist at ``path``.
    SiteConfigError
        If the top-level YAML structure is not a mapping.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> sorted(site.pages)  # doctest: +SKIP
    ['contact', 'cookies', 'home', 'privacy', 'terms']
    """
    if not path.exists():
        msg = f"Content schema '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle)
    if not isinstance(loaded, dict):
        msg = f"Content schema '{path}' must contain a top-level mapping."
        raise SiteConfigError(msg)
    return build_site_config(loaded)


def build_site_config(raw: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Build a :class:`SiteConfig` from an already-parsed mapping."""
    pages: dict[str, PageConfig] = {}
    for key, payload in _as_mapping(raw.get("pages")).items():
        page_key = str(key)
        pages[page_key] = _build_page_config(page_key, _as_mapping(payload))
    return SiteConfig(
        brand=_build_brand(_as_mapping(raw.get("brand"))),
        header=_build_header_config(_as_mapping(raw.get("header"))),
        footer=_build_footer_config(_as_mapping(raw.get("footer"))),
        pages=MappingProxyType(pages),
        build=_build_defaults(_as_mapping(raw.get("defaults"))),
    )


def _build_brand(payload: typ.Mapping[str, typ.Any]) -> Brand:
    return Brand(
        name=_text(payload.get("name"), "Brand"),
        tagline=_text(payload.get("tagline")),
    )


def _build_nav_links(entries: object) -> tuple[NavLink, ...]:
    """Build navigation links, skipping entries that are not mappings."""
    links: list[NavLink] = []
    for entry in _as_list(entries):
        match entry:
            case dict():
                links.append(
                    NavLink(
                        label=_text(entry.get("label"), "Link"),
                        href=_text(entry.get("href"), "#"),
                    )
                )
            case _:
                continue
    return tuple(links)


def _build_link_button(payload: object, default: LinkButton) -> LinkButton:
    match payload:
        case dict():
            return LinkButton(
                label=_text(payload.get("label"), "CTA"),
                href=_text(payload.get("href"), "#"),
                variant=_text(payload.get("variant"), "primary"),
            )
        case _:
            return default


def _build_header_config(payload: typ.Mapping[str, typ.Any]) -> HeaderConfig:
    return HeaderConfig(
        cta=_build_link_button(payload.get("cta"), DEFAULT_HEADER_CTA),
        nav=_build_nav_links(payload.get("nav")),
    )


def _build_footer_config(payload: typ.Mapping[str, typ.Any]) -> FooterConfig:
    return FooterConfig(
        links=_build_nav_links(payload.get("links")),
        copyright=_text(payload.get("copyright")),
    )


def _build_section(entry: object) -> SectionDescriptor | None:
    """Build one section descriptor; non-mapping entries become ``None``."""
    match entry:
        case dict():
            data = entry.get("data")
            return SectionDescriptor(
                type=_text(entry.get("type")),
                data=_freeze(data if isinstance(data, dict) else {}),
                id=_optional_str(entry.get("id")),
            )
        case _:
            return None


def _default_output(key: str) -> str:
    return "index.html" if key == DEFAULT_PAGE_KEY else f"{key}.html"


def _build_page_config(key: str, payload: typ.Mapping[str, typ.Any]) -> PageConfig:
    """Build a page from its mapping, tolerating missing ``seo``/``sections``."""
    seo = _as_mapping(payload.get("seo"))
    return PageConfig(
        key=key,
        seo=SeoConfig(
            title=_text(seo.get("title")),
            description=_text(seo.get("description")),
        ),
        sections=tuple(_build_section(entry) for entry in _as_list(payload.get("sections"))),
        output=_optional_str(payload.get("output")) or _default_output(key),
    )


def _build_defaults(payload: typ.Mapping[str, typ.Any]) -> BuildDefaults:
    base = BuildDefaults()
    match payload.get("output_dir"):
        case str() as configured if configured.strip():
            output_dir = Path(configured)
        case _:
            output_dir = base.output_dir
    return BuildDefaults(
        output_dir=output_dir,
        stylesheet=_text(payload.get("stylesheet"), base.stylesheet),
        lang=_text(payload.get("lang"), base.lang),
    )


__all__ = ["build_site_config", "load_site_config"]
