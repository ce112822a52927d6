"""Site header and footer built from the content schema."""

from __future__ import annotations

import datetime as dt
import typing as typ

from .dom import Element, h

if typ.TYPE_CHECKING:
    from .config import NavLink, SiteConfig

HOME_HREF = "index.html"


def _nav_links(links: typ.Iterable[NavLink]) -> list[Element]:
    return [h("a", {"href": link.href}, link.label) for link in links]


def render_header(site: SiteConfig) -> Element:
    """Render the header: brand, primary nav, CTA, and a collapsible mobile nav.

    The burger button toggles the ``open`` class on this header's own mobile
    nav only.
    """
    cta = site.header.cta
    mobile_nav = h("div", {"class": "mobile-nav container"}, _nav_links(site.header.nav))
    burger = h(
        "button",
        {
            "class": "burger",
            "type": "button",
            "aria-label": "Toggle navigation",
            "onClick": lambda _event: mobile_nav.class_list.toggle("open"),
        },
        "☰",
    )
    row = h(
        "div",
        {"class": "row"},
        [
            h(
                "a",
                {"class": "brand", "href": HOME_HREF},
                [h("span", {"class": "brand-badge"}), h("span", {}, site.brand.name)],
            ),
            h("nav", {"class": "nav"}, _nav_links(site.header.nav)),
            h(
                "div",
                {"class": "header-cta"},
                h("a", {"class": f"btn {cta.variant}", "href": cta.href}, cta.label),
            ),
            burger,
        ],
    )
    return h("header", {"class": "header"}, [h("div", {"class": "container"}, row), mobile_nav])


def format_copyright(template: str, today: dt.date) -> str:
    """Substitute every ``{year}`` and ``{date}`` placeholder in ``template``.

    Examples
    --------
    >>> format_copyright("© {year} X", dt.date(2024, 5, 1))
    '© 2024 X'
    """
    return template.replace("{year}", str(today.year)).replace(
        "{date}", today.isoformat()
    )


def render_footer(site: SiteConfig, today: dt.date) -> Element:
    """Render the footer: brand column, link column, and the copyright line."""
    columns = h(
        "div",
        {"class": "cols"},
        [
            h(
                "div",
                {},
                [
                    h("div", {"class": "footer-brand"}, site.brand.name),
                    h("div", {"class": "small"}, site.brand.tagline),
                ],
            ),
            h("div", {}, [h("div", {}, link) for link in _nav_links(site.footer.links)]),
        ],
    )
    copyright_line = h(
        "div",
        {"class": "copyright"},
        format_copyright(site.footer.copyright, today),
    )
    return h(
        "footer",
        {"class": "footer"},
        h("div", {"class": "container"}, [columns, copyright_line]),
    )


__all__ = ["format_copyright", "render_footer", "render_header"]
