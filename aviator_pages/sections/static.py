"""Stateless section renderers for the marketing and legal pages.

Each class renders one :class:`~aviator_pages.sections.base.SectionKind` from
its data payload. Absent fields render as empty strings or empty lists; the
only behaviour attached to the output is purely local toggling (FAQ items).
"""

from __future__ import annotations

import datetime as dt
import math
import typing as typ

from markdown import markdown

from aviator_pages.dom import Element, h

from .base import SectionData, SectionKind, items, mapping, mappings, text

Clock = typ.Callable[[], dt.date]

MAX_STARS = 5


def utc_today() -> dt.date:
    """Return the current UTC calendar date."""
    return dt.datetime.now(dt.UTC).date()


def stars(count: object) -> str:
    """Return a five-character star rating clamped to ``0..5``.

    Non-numeric values count as zero; infinities clamp to the nearest bound.
    """
    try:
        value = float(count or 0)
    except (TypeError, ValueError):
        value = 0.0
    if math.isnan(value):
        value = 0.0
    filled = int(max(0.0, min(float(MAX_STARS), value)))
    return ("★" * filled).ljust(MAX_STARS, "☆")


def button_link(payload: SectionData, default_label: str = "") -> Element:
    """Render a ``{label, href, variant}`` mapping as a button-styled link."""
    variant = text(payload, "variant", "primary")
    return h(
        "a",
        {"class": f"btn {variant}", "href": text(payload, "href", "#")},
        text(payload, "label", default_label),
    )


def _section(class_name: str, container: Element, **attrs: str) -> Element:
    return h("section", {"class": class_name, **attrs}, container)


def _stat_row(class_name: str, item_class: str, entries: list[SectionData]) -> Element:
    return h(
        "div",
        {"class": class_name},
        [
            h(
                "div",
                {"class": item_class},
                [
                    h("p", {"class": "v"}, text(entry, "value")),
                    h("p", {"class": "l"}, text(entry, "label")),
                ],
            )
            for entry in entries
        ],
    )


class HeroSection:
    """Headline, subtitle, call-to-action buttons, and a metrics strip."""

    kind = SectionKind.HERO

    def render(self, data: SectionData) -> Element:
        container = h(
            "div",
            {"class": "container"},
            [
                h("h1", {}, text(data, "h1")),
                h("p", {"class": "sub"}, text(data, "subtitle")),
                h(
                    "div",
                    {"class": "buttons"},
                    [button_link(cta) for cta in mappings(data, "cta")],
                ),
                _stat_row("metrics", "metric", mappings(data, "metrics")),
            ],
        )
        return _section("hero", container)


class SocialProofSection:
    """Trust logos and headline statistics."""

    kind = SectionKind.SOCIAL_PROOF

    def render(self, data: SectionData) -> Element:
        logos = h(
            "div",
            {"class": "logo-row"},
            [
                h("div", {"class": "logo-pill"}, text(logo, "text", "Logo"))
                for logo in mappings(data, "logos")
            ],
        )
        container = h(
            "div",
            {"class": "container"},
            [
                h("h2", {}, text(data, "h2")),
                h("p", {"class": "subcenter"}, text(data, "subtitle")),
                logos,
                _stat_row("stats-row", "stat", mappings(data, "stats")),
            ],
        )
        return _section("section social", container)


class SeoIntroSection:
    """Heading followed by plain paragraphs."""

    kind = SectionKind.SEO_INTRO

    def render(self, data: SectionData) -> Element:
        paragraphs = [h("p", {}, str(entry)) for entry in items(data, "text")]
        container = h(
            "div", {"class": "container"}, [h("h2", {}, text(data, "h2")), *paragraphs]
        )
        return _section("section", container)


class FeaturesCardsSection:
    """Grid of title/text feature cards."""

    kind = SectionKind.FEATURES_CARDS

    def render(self, data: SectionData) -> Element:
        grid = h(
            "div",
            {"class": "grid"},
            [
                h(
                    "div",
                    {"class": "card"},
                    [h("h3", {}, text(item, "title")), h("p", {}, text(item, "text"))],
                )
                for item in mappings(data, "items")
            ],
        )
        container = h("div", {"class": "container"}, [h("h2", {}, text(data, "h2")), grid])
        return _section("section dark", container)


class HowItWorksSection:
    """Numbered steps with an optional metrics row underneath."""

    kind = SectionKind.HOW_IT_WORKS

    def render(self, data: SectionData) -> Element:
        steps = h(
            "div",
            {"class": "step-row"},
            [
                h(
                    "div",
                    {"class": "step"},
                    [
                        h("div", {"class": "num"}, f"{index:02d}"),
                        h("h3", {}, text(step, "title")),
                        h("p", {}, text(step, "text")),
                    ],
                )
                for index, step in enumerate(mappings(data, "steps"), start=1)
            ],
        )
        metrics = mappings(data, "metrics")
        container = h(
            "div",
            {"class": "container"},
            [
                h("h2", {}, text(data, "h2", "How It Works")),
                h("p", {"class": "subcenter"}, text(data, "subtitle")),
                steps,
                _stat_row("metrics", "metric", metrics) if metrics else None,
            ],
        )
        return _section("section steps", container)


class TestimonialsSection:
    """Customer quotes with star ratings."""

    __test__ = False
    kind = SectionKind.TESTIMONIALS

    def render(self, data: SectionData) -> Element:
        grid = h(
            "div",
            {"class": "test-grid"},
            [
                h(
                    "div",
                    {"class": "test"},
                    [
                        h("div", {"class": "stars"}, stars(entry.get("stars") or MAX_STARS)),
                        h("p", {}, text(entry, "text")),
                        h("div", {"class": "person"}, text(entry, "name")),
                        h("div", {"class": "role"}, text(entry, "role")),
                    ],
                )
                for entry in mappings(data, "items")
            ],
        )
        container = h(
            "div",
            {"class": "container"},
            [
                h("h2", {}, text(data, "h2", "Testimonials")),
                h("p", {"class": "subcenter"}, text(data, "subtitle")),
                grid,
            ],
        )
        return _section("section", container)


class FaqAccordionSection:
    """Question/answer list; each question toggles its own item open."""

    kind = SectionKind.FAQ_ACCORDION

    def render(self, data: SectionData) -> Element:
        faq_list = h(
            "div",
            {"class": "faq-list"},
            [self._item(entry) for entry in mappings(data, "items")],
        )
        container = h(
            "div", {"class": "container"}, [h("h2", {}, text(data, "h2", "FAQ")), faq_list]
        )
        return _section("section dark", container)

    @staticmethod
    def _item(entry: SectionData) -> Element:
        wrap = h("div", {"class": "faq-item"})
        question = h(
            "button",
            {"class": "faq-q", "type": "button"},
            [h("span", {}, text(entry, "q")), h("span", {"class": "chev"}, "▾")],
        )
        question.add_event_listener("click", lambda _event: wrap.class_list.toggle("open"))
        wrap.append_child(question)
        wrap.append_child(h("div", {"class": "faq-a"}, text(entry, "a")))
        return wrap


class CtaBannerSection:
    """Closing call to action with an optional button."""

    kind = SectionKind.CTA_BANNER

    def render(self, data: SectionData) -> Element:
        button = mapping(data, "button")
        container = h(
            "div",
            {"class": "container center"},
            [
                h("h2", {}, text(data, "title")),
                h("p", {"class": "subcenter"}, text(data, "subtitle")),
                button_link(button, "CTA") if button else None,
            ],
        )
        return _section("section", container)


class LegalTextSection:
    """Legal copy: title, ``{date}``-stamped update line, and paragraphs.

    An optional ``markdown`` field is rendered with Python-Markdown and
    inserted as trusted markup below the plain paragraphs.
    """

    kind = SectionKind.LEGAL_TEXT

    def __init__(self, clock: Clock = utc_today) -> None:
        self.clock = clock

    def render(self, data: SectionData) -> Element:
        today = self.clock().isoformat()
        box = h("div", {"class": "box"}, [h("p", {}, str(p)) for p in items(data, "paragraphs")])
        body = text(data, "markdown")
        if body:
            box.append_child(h("div", {"class": "prose", "html": markdown(body)}))
        container = h(
            "div",
            {"class": "container"},
            [
                h("h1", {}, text(data, "title", "Legal")),
                h("p", {"class": "updated"}, text(data, "updated").replace("{date}", today)),
                box,
            ],
        )
        return _section("section legal", container)


__all__ = [
    "CtaBannerSection",
    "FaqAccordionSection",
    "FeaturesCardsSection",
    "HeroSection",
    "HowItWorksSection",
    "LegalTextSection",
    "SeoIntroSection",
    "SocialProofSection",
    "TestimonialsSection",
    "button_link",
    "stars",
    "utc_today",
]
