"""Unit tests for the element builder.

These tests cover how :func:`aviator_pages.dom.h` interprets its attribute
mapping (class, trusted html, event listeners, coerced attributes) and its
children argument (text, nodes, sequences with skipped ``None`` entries), plus
the DOM helpers the engine relies on.

Usage
-----
Run ``pytest tests/test_dom.py -v``. No fixtures are required.
"""

from __future__ import annotations

from aviator_pages.dom import (
    Element,
    Empty,
    Event,
    Many,
    Single,
    Text,
    TextChild,
    as_child_spec,
    h,
    markup_text,
)


def test_class_key_sets_class_string() -> None:
    """The ``class`` key should set the whole class string."""
    node = h("div", {"class": "card featured"})
    assert list(node.class_list) == ["card", "featured"], (
        f"unexpected classes {list(node.class_list)!r}"
    )


def test_html_key_inserts_raw_markup() -> None:
    """The ``html`` key should insert markup verbatim, without escaping."""
    node = h("div", {"html": "<em>trusted</em>"})
    assert node.to_html() == "<div><em>trusted</em></div>"


def test_raw_markup_text_content_strips_tags() -> None:
    """Text content of trusted markup excludes tags and decodes entities."""
    node = h("div", {"html": "<h2>Cookies</h2><p>Tea &amp; <b>biscuits</b></p>"})
    assert node.text_content == "CookiesTea & biscuits"
    assert markup_text("plain") == "plain"


def test_on_prefixed_callable_registers_listener() -> None:
    """``onClick`` bound to a callable should register a click listener."""
    seen: list[str] = []
    node = h("button", {"onClick": lambda event: seen.append(event.type)})
    node.click()
    assert seen == ["click"], f"listener not invoked, saw {seen!r}"
    assert "onClick" not in node.attributes, "listener must not become an attribute"


def test_on_prefixed_non_callable_is_plain_attribute() -> None:
    """``on*`` keys with non-callable values are stored as attributes."""
    node = h("div", {"onload": "init()"})
    assert node.get_attribute("onload") == "init()"


def test_other_values_are_coerced_to_strings() -> None:
    """Non-string attribute values should be stored via ``str``."""
    node = h("img", {"width": 640, "alt": None})
    assert node.get_attribute("width") == "640"
    assert node.get_attribute("alt") is None, "None values should be omitted"


def test_text_children_replace_content() -> None:
    """String and number children become the element's only text."""
    assert h("p", {}, "hello").text_content == "hello"
    assert h("p", {}, 42).text_content == "42"


def test_sequence_children_skip_none() -> None:
    """``None`` entries are skipped so conditional content can be inlined."""
    node = h("ul", {}, [h("li", {}, "a"), None, "b", 3])
    assert [type(child) for child in node.children] == [Element, Text, Text]
    assert node.text_content == "ab3"


def test_single_node_child_is_appended() -> None:
    """A single node child should be appended as-is."""
    inner = h("span", {}, "x")
    outer = h("div", {}, inner)
    assert outer.children == [inner]
    assert inner.parent is outer


def test_child_spec_conversion() -> None:
    """Loose children map onto the tagged ``ChildSpec`` union."""
    node = h("b")
    assert as_child_spec(None) == Empty()
    assert as_child_spec("t") == TextChild("t")
    assert as_child_spec(node) == Single(node)
    assert as_child_spec(["t", None]) == Many((TextChild("t"), Empty()))


def test_class_list_toggle_and_contains() -> None:
    """``toggle`` should flip membership and report the new state."""
    node = h("div", {"class": "faq-item"})
    assert node.class_list.toggle("open") is True
    assert "open" in node.class_list
    assert node.class_list.toggle("open") is False
    assert node.class_name == "faq-item"


def test_dispatch_event_reports_prevent_default() -> None:
    """``dispatch_event`` returns False when a listener cancels the default."""
    form = h("form", {"onSubmit": lambda event: event.prevent_default()})
    event = Event("submit")
    assert form.dispatch_event(event) is False
    assert event.default_prevented
    assert event.target is form


def test_serialisation_escapes_text_and_attributes() -> None:
    """Text and attribute values must be escaped; void elements have no close tag."""
    node = h("div", {"title": 'a "b"'}, [h("input", {"type": "text"}), "<x>"])
    assert node.to_html() == (
        '<div title="a &quot;b&quot;"><input type="text">&lt;x&gt;</div>'
    )


def test_hidden_is_boolean_attribute() -> None:
    """``hidden`` toggles a valueless attribute."""
    node = h("div")
    node.hidden = True
    assert node.to_html() == "<div hidden></div>"
    node.hidden = False
    assert node.to_html() == "<div></div>"


def test_select_value_defaults_to_first_option() -> None:
    """A select reports its first option until a value is chosen."""
    select = h(
        "select", {}, [h("option", {"value": "a"}, "A"), h("option", {"value": "b"}, "B")]
    )
    assert select.value == "a"
    select.value = "b"
    assert '<option value="b" selected>B</option>' in select.to_html()


def test_find_helpers() -> None:
    """``find_by_id`` and ``find_all`` search descendants depth-first."""
    tree = h("div", {}, [h("p", {"id": "x", "class": "note"}), h("p", {"class": "note"})])
    assert tree.find_by_id("x") is tree.children[0]
    assert len(list(tree.find_all(class_name="note"))) == 2
    assert tree.find(tag="span") is None
