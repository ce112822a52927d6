"""Tests for the stateless section renderers and the contact form.

Every renderer must tolerate an empty payload, so the first test renders each
registered kind with ``{}``. The remaining tests pin the behaviour that is
specific to a renderer: star ratings, FAQ toggling, step numbering, legal
``{date}`` stamping, Markdown bodies, and contact form interception.

Usage
-----
Run ``pytest tests/test_static_sections.py -v``.
"""

from __future__ import annotations

import datetime as dt
import math

import pytest

from aviator_pages.dom import Event
from aviator_pages.forms import (
    PLACEHOLDER_ACKNOWLEDGEMENT,
    FormSubmission,
    PlaceholderTransport,
)
from aviator_pages.sections import (
    ContactFormSection,
    CtaBannerSection,
    FaqAccordionSection,
    HeroSection,
    HowItWorksSection,
    LegalTextSection,
    SectionKind,
    TestimonialsSection,
    default_registry,
)
from aviator_pages.sections.static import stars

FIXED_DATE = dt.date(2024, 2, 29)


@pytest.mark.parametrize("kind", [kind.value for kind in SectionKind])
def test_every_renderer_accepts_empty_data(kind: str) -> None:
    """No renderer raises when its payload is empty."""
    renderer = default_registry().get(kind)
    assert renderer is not None
    node = renderer.render({})
    assert node.tag == "section", f"{kind} should render a <section>"


def test_hero_renders_ctas_and_metrics() -> None:
    """Hero buttons carry their variant and metrics keep value/label order."""
    node = HeroSection().render(
        {
            "h1": "Title",
            "cta": [{"label": "Go", "href": "contact.html", "variant": "secondary"}, "junk"],
            "metrics": [{"value": "24/7", "label": "Support"}],
        }
    )
    button = node.find(tag="a")
    assert button.get_attribute("class") == "btn secondary"
    assert button.get_attribute("href") == "contact.html"
    metric = node.find(class_name="metric")
    assert [p.text_content for p in metric.find_all(tag="p")] == ["24/7", "Support"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (5, "★★★★★"),
        (3, "★★★☆☆"),
        (0, "☆☆☆☆☆"),
        (9, "★★★★★"),
        ("x", "☆☆☆☆☆"),
        ("4", "★★★★☆"),
        (math.inf, "★★★★★"),
        (-math.inf, "☆☆☆☆☆"),
        (math.nan, "☆☆☆☆☆"),
    ],
)
def test_stars(value: object, expected: str) -> None:
    """Star ratings clamp to the 0..5 range."""
    assert stars(value) == expected


def test_testimonial_defaults_to_five_stars() -> None:
    """A testimonial without ``stars`` shows a full rating."""
    node = TestimonialsSection().render({"items": [{"text": "Great"}]})
    assert node.find(class_name="stars").text_content == "★★★★★"


def test_testimonial_infinite_stars_clamp() -> None:
    """An infinite rating renders as a full row instead of failing."""
    node = TestimonialsSection().render({"items": [{"stars": math.inf}]})
    assert node.tag == "section"
    assert node.find(class_name="stars").text_content == "★★★★★"


def test_faq_items_toggle_independently() -> None:
    """Clicking a question opens only its own item."""
    node = FaqAccordionSection().render({"items": [{"q": "A?", "a": "a"}, {"q": "B?"}]})
    first, second = node.find_all(class_name="faq-item")
    first.find(tag="button").click()
    assert first.class_list.contains("open")
    assert not second.class_list.contains("open")
    first.find(tag="button").click()
    assert not first.class_list.contains("open")


def test_how_it_works_numbers_steps() -> None:
    """Steps are numbered with two digits and metrics render when given."""
    node = HowItWorksSection().render(
        {"steps": [{"title": "One"}, {"title": "Two"}], "metrics": [{"value": "1 API"}]}
    )
    assert [n.text_content for n in node.find_all(class_name="num")] == ["01", "02"]
    assert node.find(class_name="metrics") is not None


def test_how_it_works_omits_empty_metrics() -> None:
    """Without metrics no metrics row is rendered."""
    node = HowItWorksSection().render({"steps": []})
    assert node.find(class_name="metrics") is None
    assert node.find(tag="h2").text_content == "How It Works"


def test_cta_banner_button_is_optional() -> None:
    """The banner renders a button only when one is configured."""
    assert CtaBannerSection().render({"title": "T"}).find(tag="a") is None
    node = CtaBannerSection().render({"button": {"href": "contact.html"}})
    assert node.find(tag="a").text_content == "CTA"


def test_legal_text_stamps_render_date() -> None:
    """``{date}`` is replaced with the clock's ISO date."""
    node = LegalTextSection(clock=lambda: FIXED_DATE).render(
        {"updated": "Last updated: {date}", "paragraphs": ["One", "Two"]}
    )
    assert node.find(class_name="updated").text_content == "Last updated: 2024-02-29"
    assert len(list(node.find(class_name="box").find_all(tag="p"))) == 2
    assert node.find(tag="h1").text_content == "Legal"


def test_legal_text_markdown_body() -> None:
    """A Markdown body is rendered to HTML inside the legal box."""
    node = LegalTextSection(clock=lambda: FIXED_DATE).render(
        {"markdown": "## Cookies\n\n- **Essential** only\n"}
    )
    html = node.to_html()
    assert "<h2>Cookies</h2>" in html
    assert "<strong>Essential</strong>" in html


def test_contact_form_submission_is_intercepted() -> None:
    """Submitting cancels navigation and hands values to the transport."""
    transport = PlaceholderTransport()
    node = ContactFormSection(transport).render({"fields": {"nameLabel": "Your name"}})
    node.find_by_id("contact-name").value = "Ada"
    node.find_by_id("contact-email").value = "ada@example.com"
    node.find_by_id("contact-message").value = "Hello"
    event = Event("submit")
    form = node.find(tag="form")
    assert form.dispatch_event(event) is False, "submit should be prevented"
    assert transport.received == [
        FormSubmission(name="Ada", email="ada@example.com", message="Hello")
    ]
    assert node.find(class_name="form-status").text_content == (
        PLACEHOLDER_ACKNOWLEDGEMENT
    )
    assert node.find(tag="label").text_content == "Your name"


def test_contact_form_defaults() -> None:
    """Missing labels, button, and note fall back to defaults."""
    node = ContactFormSection().render({})
    labels = [label.text_content for label in node.find_all(tag="label")]
    assert labels == ["Name", "Email", "Message"]
    assert node.find(tag="button").text_content == "Send"
    assert node.find(class_name="note") is None
