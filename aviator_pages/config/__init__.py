"""Load the site content schema for the section renderer.

This subpackage parses the project's ``site.yaml`` file into immutable
dataclasses (:class:`SiteConfig`, :class:`PageConfig`,
:class:`SectionDescriptor`, etc.) that the page assembler consumes. The
primary entry point is :func:`load_site_config`. Loading is deliberately
tolerant: absent or malformed fields fall back to defaults, and section
payloads are passed through untouched (but frozen) for each renderer to
interpret.

Examples
--------
>>> from pathlib import Path
>>> from aviator_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.get_page("home").section_types[0]  # doctest: +SKIP
'hero.v1'
"""

from .loader import build_site_config, load_site_config
from .models import (
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

__all__ = [
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
    "build_site_config",
    "load_site_config",
]
