"""Behaviour tests for page assembly when sections misbehave.

The scenarios assemble small in-memory pages and verify that an unknown
section type is replaced by a visible placeholder while the following
sections and the footer still render, and that footer placeholders follow the
injected render date.

Usage
-----
Run ``pytest tests/bdd/test_partial_render.py -v``.
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from aviator_pages.assembler import AssemblyReport, HostDocument, PageAssembler
from aviator_pages.config import build_site_config
from aviator_pages.dom import Element

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "partial_render.feature"
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Share the schema, clock, and assembled document between steps."""
    return {"raw": {}, "today": dt.date(2025, 1, 1)}


def _nodes(scenario_state: ScenarioState) -> list[Element]:
    document = typ.cast("HostDocument", scenario_state["document"])
    assert document.root is not None
    return [child for child in document.root.children if isinstance(child, Element)]


@given(parsers.parse('a home page with a hero, a "{kind}" section, and an FAQ'))
def given_partial_page(scenario_state: ScenarioState, kind: str) -> None:
    """Describe a home page whose middle section has no renderer."""
    scenario_state["raw"] = {
        "pages": {
            "home": {
                "sections": [
                    {"type": "hero.v1", "data": {"h1": "Hello"}},
                    {"type": kind, "data": {}},
                    {"id": "faq", "type": "faqAccordion.v1", "data": {}},
                ]
            }
        }
    }


@given(parsers.parse('a footer copyright of "{template}"'))
def given_copyright(scenario_state: ScenarioState, template: str) -> None:
    """Describe a site with an empty home page and the given footer line."""
    scenario_state["raw"] = {
        "footer": {"copyright": template},
        "pages": {"home": {"sections": []}},
    }


@given(parsers.parse("the render date is {year:d}-{month:d}-{day:d}"))
def given_render_date(
    scenario_state: ScenarioState, year: int, month: int, day: int
) -> None:
    """Fix the assembler clock."""
    scenario_state["today"] = dt.date(year, month, day)


@when("the page is assembled")
def when_assembled(scenario_state: ScenarioState) -> None:
    """Assemble the home page into a fresh host document."""
    today = typ.cast("dt.date", scenario_state["today"])
    assembler = PageAssembler(
        build_site_config(scenario_state["raw"]), clock=lambda: today
    )
    document = HostDocument.create("home")
    scenario_state["report"] = assembler.assemble(document)
    scenario_state["document"] = document


@then(
    parsers.parse(
        "the root holds the header, {count:d} section nodes, and the footer"
    )
)
def then_root_layout(scenario_state: ScenarioState, count: int) -> None:
    """Header first, footer last, one node per section in between."""
    nodes = _nodes(scenario_state)
    assert nodes[0].tag == "header"
    assert nodes[-1].tag == "footer"
    assert len(nodes) == count + 2


@then(parsers.parse('the second section node names "{kind}"'))
def then_placeholder(scenario_state: ScenarioState, kind: str) -> None:
    """The unknown section is replaced by a placeholder naming its type."""
    placeholder = _nodes(scenario_state)[2]
    assert placeholder.class_list.contains("section-unknown")
    assert kind in placeholder.text_content
    report = typ.cast("AssemblyReport", scenario_state["report"])
    assert report.unknown_types == [kind]


@then("the FAQ section is rendered after it")
def then_faq_rendered(scenario_state: ScenarioState) -> None:
    """Rendering continued past the placeholder."""
    assert _nodes(scenario_state)[3].id == "faq"


@then(parsers.parse('the footer reads "{expected}"'))
def then_footer_reads(scenario_state: ScenarioState, expected: str) -> None:
    """The copyright line has every placeholder substituted."""
    footer = _nodes(scenario_state)[-1]
    assert footer.find(class_name="copyright").text_content == expected
