"""Minimal DOM-like element tree used by the section rendering engine.

Section renderers build their output with :func:`h`, which mirrors the
``document.createElement`` idiom: a tag, an attribute mapping, and a children
argument. The resulting :class:`Element` tree supports the handful of DOM
operations the engine relies on (class lists, text content, event listeners,
lookups by id) and serialises to HTML for the static page build.

Examples
--------
>>> from aviator_pages.dom import h
>>> node = h("p", {"class": "lede"}, ["Hello ", h("strong", {}, "world")])
>>> node.to_html()
'<p class="lede">Hello <strong>world</strong></p>'
>>> h("ul", {}, [None, h("li", {}, 1)]).to_html()
'<ul><li>1</li></ul>'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ
from html import escape
from html.parser import HTMLParser

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)
FORM_CONTROLS = frozenset({"input", "select", "textarea"})

Listener = cabc.Callable[["Event"], object]


class Node:
    """Base class for every node that can live inside an :class:`Element`."""

    __slots__ = ("parent",)

    def __init__(self) -> None:
        self.parent: Element | None = None

    @property
    def text_content(self) -> str:
        return ""

    def to_html(self) -> str:
        raise NotImplementedError


class Text(Node):
    """Plain text; escaped on serialisation."""

    __slots__ = ("data",)

    def __init__(self, data: str) -> None:
        super().__init__()
        self.data = data

    @property
    def text_content(self) -> str:
        return self.data

    def to_html(self) -> str:
        return escape(self.data, quote=False)

    def __repr__(self) -> str:
        return f"Text({self.data!r})"


class _TextExtractor(HTMLParser):
    """Collects character data from a markup fragment."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.parts: list[str] = []

    def handle_data(self, data: str) -> None:
        self.parts.append(data)


def markup_text(markup: str) -> str:
    """Return the text of ``markup`` with tags removed and entities decoded.

    Examples
    --------
    >>> markup_text("<h2>Cookies</h2><p>A &amp; B</p>")
    'CookiesA & B'
    """
    parser = _TextExtractor()
    parser.feed(markup)
    parser.close()
    return "".join(parser.parts)


class RawHtml(Node):
    """Trusted markup inserted verbatim (the ``html`` attribute path)."""

    __slots__ = ("markup",)

    def __init__(self, markup: str) -> None:
        super().__init__()
        self.markup = markup

    @property
    def text_content(self) -> str:
        return markup_text(self.markup)

    def to_html(self) -> str:
        return self.markup


@dc.dataclass(slots=True)
class Event:
    """A dispatched event; listeners may cancel the default action."""

    type: str
    target: Element | None = None
    detail: typ.Any = None
    default_prevented: bool = False

    def prevent_default(self) -> None:
        """Mark the event's default action (e.g. form navigation) as cancelled."""
        self.default_prevented = True


class ClassList:
    """View over an element's ``class`` attribute with DOMTokenList semantics."""

    __slots__ = ("_element",)

    def __init__(self, element: Element) -> None:
        self._element = element

    def _tokens(self) -> list[str]:
        return self._element.attributes.get("class", "").split()

    def _store(self, tokens: list[str]) -> None:
        if tokens:
            self._element.attributes["class"] = " ".join(tokens)
        else:
            self._element.attributes.pop("class", None)

    def add(self, *names: str) -> None:
        tokens = self._tokens()
        tokens.extend(name for name in names if name not in tokens)
        self._store(tokens)

    def remove(self, *names: str) -> None:
        self._store([token for token in self._tokens() if token not in names])

    def toggle(self, name: str) -> bool:
        """Flip ``name`` and return whether it is now present."""
        if self.contains(name):
            self.remove(name)
            return False
        self.add(name)
        return True

    def contains(self, name: str) -> bool:
        return name in self._tokens()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def __iter__(self) -> cabc.Iterator[str]:
        return iter(self._tokens())

    def __str__(self) -> str:
        return " ".join(self._tokens())


class Element(Node):
    """A tagged node with attributes, children, and event listeners."""

    __slots__ = ("_listeners", "_value", "attributes", "children", "tag")

    def __init__(self, tag: str) -> None:
        super().__init__()
        self.tag = tag.lower()
        self.attributes: dict[str, str] = {}
        self.children: list[Node] = []
        self._listeners: dict[str, list[Listener]] = {}
        self._value: str | None = None

    def __repr__(self) -> str:
        ident = f"#{self.id}" if self.id else ""
        classes = "".join(f".{name}" for name in self.class_list)
        return f"<Element {self.tag}{ident}{classes}>"

    # -- attributes -------------------------------------------------------

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: object) -> None:
        self.attributes[name] = str(value)

    def remove_attribute(self, name: str) -> None:
        self.attributes.pop(name, None)

    @property
    def id(self) -> str:
        return self.attributes.get("id", "")

    @id.setter
    def id(self, value: str) -> None:
        self.attributes["id"] = str(value)

    @property
    def class_name(self) -> str:
        return self.attributes.get("class", "")

    @class_name.setter
    def class_name(self, value: object) -> None:
        self.attributes["class"] = str(value)

    @property
    def class_list(self) -> ClassList:
        return ClassList(self)

    @property
    def hidden(self) -> bool:
        return "hidden" in self.attributes

    @hidden.setter
    def hidden(self, value: bool) -> None:
        if value:
            self.attributes["hidden"] = ""
        else:
            self.attributes.pop("hidden", None)

    @property
    def value(self) -> str:
        """Current value of a form control.

        A ``select`` without an explicit value reports its first option, the
        way browsers do.
        """
        if self._value is not None:
            return self._value
        if self.tag == "select":
            first = self.find(tag="option")
            if first is None:
                return ""
            return first.get_attribute("value") or ""
        if self.tag == "textarea":
            return self.text_content
        return self.attributes.get("value", "")

    @value.setter
    def value(self, value: object) -> None:
        self._value = str(value)

    # -- children ---------------------------------------------------------

    def append_child(self, node: Node) -> Node:
        if node.parent is not None:
            node.parent.children.remove(node)
        node.parent = self
        self.children.append(node)
        return node

    def clear(self) -> None:
        """Drop every child (``innerHTML = ""``)."""
        for child in self.children:
            child.parent = None
        self.children = []

    @property
    def text_content(self) -> str:
        return "".join(child.text_content for child in self.children)

    @text_content.setter
    def text_content(self, value: object) -> None:
        self.clear()
        self.append_child(Text(str(value)))

    def set_inner_html(self, markup: object) -> None:
        self.clear()
        self.append_child(RawHtml(str(markup)))

    # -- events -----------------------------------------------------------

    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    def remove_event_listener(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)

    def has_listeners(self, event_type: str) -> bool:
        return bool(self._listeners.get(event_type))

    def dispatch_event(self, event: Event | str) -> bool:
        """Invoke listeners synchronously, in registration order.

        Returns ``False`` when a listener called ``prevent_default``.
        """
        if isinstance(event, str):
            event = Event(event)
        if event.target is None:
            event.target = self
        for listener in list(self._listeners.get(event.type, [])):
            listener(event)
        return not event.default_prevented

    def click(self) -> bool:
        return self.dispatch_event(Event("click"))

    # -- queries ----------------------------------------------------------

    def iter_elements(self) -> cabc.Iterator[Element]:
        """Yield this element and all descendant elements depth-first."""
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.iter_elements()

    def find_by_id(self, element_id: str) -> Element | None:
        return next(
            (node for node in self.iter_elements() if node.id == element_id), None
        )

    def find_all(
        self, *, tag: str | None = None, class_name: str | None = None
    ) -> cabc.Iterator[Element]:
        for node in self.iter_elements():
            if node is self:
                continue
            if tag is not None and node.tag != tag:
                continue
            if class_name is not None and not node.class_list.contains(class_name):
                continue
            yield node

    def find(
        self, *, tag: str | None = None, class_name: str | None = None
    ) -> Element | None:
        return next(self.find_all(tag=tag, class_name=class_name), None)

    # -- serialisation ----------------------------------------------------

    def _serialised_attributes(self) -> dict[str, str]:
        attrs = dict(self.attributes)
        if self._value is not None and self.tag == "input":
            attrs["value"] = self._value
        return attrs

    def to_html(self) -> str:
        parts = [f"<{self.tag}"]
        for name, value in self._serialised_attributes().items():
            if value == "" and name in {"hidden", "selected", "disabled", "open"}:
                parts.append(f" {name}")
            else:
                parts.append(f' {name}="{escape(value, quote=True)}"')
        parts.append(">")
        if self.tag in VOID_ELEMENTS:
            return "".join(parts)
        if self.tag == "select":
            selected = self.value
            for child in self.children:
                if isinstance(child, Element) and child.tag == "option":
                    child.attributes.pop("selected", None)
                    if child.get_attribute("value") == selected:
                        child.attributes["selected"] = ""
        if self.tag == "textarea" and self._value is not None:
            parts.append(escape(self._value, quote=False))
        else:
            parts.extend(child.to_html() for child in self.children)
        parts.append(f"</{self.tag}>")
        return "".join(parts)


# -- children specification ---------------------------------------------------


@dc.dataclass(frozen=True, slots=True)
class Empty:
    """No children."""


@dc.dataclass(frozen=True, slots=True)
class TextChild:
    """A text child; at the top level it replaces any other children."""

    text: str


@dc.dataclass(frozen=True, slots=True)
class Single:
    """One node appended as-is."""

    node: Node


@dc.dataclass(frozen=True, slots=True)
class Many:
    """An ordered run of children; ``Empty`` entries are skipped."""

    items: tuple[ChildSpec, ...]


ChildSpec = Empty | TextChild | Single | Many
Children = (
    ChildSpec | Node | str | int | float | cabc.Iterable[typ.Any] | None
)


def as_child_spec(children: typ.Any) -> ChildSpec:
    """Convert the loosely typed children argument into a :data:`ChildSpec`."""
    match children:
        case None:
            return Empty()
        case Empty() | TextChild() | Single() | Many():
            return children
        case Node():
            return Single(children)
        case str() | int() | float():
            return TextChild(str(children))
        case cabc.Iterable():
            return Many(tuple(as_child_spec(item) for item in children))
        case _:
            return TextChild(str(children))


def _append_children(element: Element, spec: ChildSpec) -> None:
    match spec:
        case Empty():
            return
        case TextChild(text=text):
            element.append_child(Text(text))
        case Single(node=node):
            element.append_child(node)
        case Many(items=items):
            for item in items:
                _append_children(element, item)


def h(
    tag: str,
    attrs: cabc.Mapping[str, typ.Any] | None = None,
    children: Children = None,
) -> Element:
    """Build an element from a tag, attribute mapping, and children.

    Parameters
    ----------
    tag : str
        Element tag name.
    attrs : Mapping[str, Any], optional
        ``class`` sets the class string, ``html`` sets trusted inner markup
        without sanitisation, ``on<Event>`` keys bound to callables register
        listeners for ``<event>``; any other key is stored as a string
        attribute. ``None`` values are omitted rather than stored as the
        string ``"null"`` the way a browser's ``setAttribute`` would.
    children : str, int, float, Node, Iterable, ChildSpec, or None
        Text replaces any other children; nodes are appended; iterables are
        appended in order with ``None`` entries skipped.

    Returns
    -------
    Element
        The constructed element.
    """
    element = Element(tag)
    for key, value in (attrs or {}).items():
        if key == "class":
            element.class_name = value
        elif key == "html":
            element.set_inner_html(value)
        elif key.startswith("on") and len(key) > 2 and callable(value):
            element.add_event_listener(key[2:].lower(), value)
        elif value is not None:
            element.set_attribute(key, value)

    spec = as_child_spec(children)
    if isinstance(spec, TextChild):
        element.text_content = spec.text
    else:
        _append_children(element, spec)
    return element


__all__ = [
    "ChildSpec",
    "ClassList",
    "Element",
    "Empty",
    "Event",
    "Many",
    "Node",
    "RawHtml",
    "markup_text",
    "Single",
    "Text",
    "TextChild",
    "as_child_spec",
    "h",
]
