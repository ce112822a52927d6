"""Resolve section descriptors against the registry and render them.

:func:`render_section` is the plain dispatcher: it raises whatever the
renderer raises. :func:`try_render` wraps it in an explicit result type so the
page assembler can substitute :func:`error_block` for a failing section and
keep going.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from types import MappingProxyType

from .dom import Element, h

if typ.TYPE_CHECKING:
    from .config import SectionDescriptor
    from .sections import SectionRegistry

EMPTY_DATA: typ.Mapping[str, typ.Any] = MappingProxyType({})


@dc.dataclass(frozen=True, slots=True)
class Rendered:
    """A section that rendered successfully."""

    node: Element


@dc.dataclass(frozen=True, slots=True)
class RenderFailure:
    """A section whose renderer raised."""

    section_type: str
    message: str
    error: Exception
    section_id: str | None = None


RenderResult = Rendered | RenderFailure


def unknown_section(section_type: str) -> Element:
    """Placeholder shown in place of a section with no registered renderer."""
    return h("div", {"class": "section-unknown"}, f"Unknown section type: {section_type}")


def error_block(failure: RenderFailure) -> Element:
    """Inline error shown in place of a section whose renderer raised."""
    return h(
        "div",
        {"class": "section-error", "role": "alert"},
        f"Error rendering section {failure.section_type}: {failure.message}",
    )


def render_section(
    descriptor: SectionDescriptor | None, registry: SectionRegistry
) -> Element:
    """Render one section descriptor into a single root element.

    Parameters
    ----------
    descriptor : SectionDescriptor or None
        Section to render. ``None`` yields an empty ``div``.
    registry : SectionRegistry
        Renderers keyed by section type.

    Returns
    -------
    Element
        The renderer's root element, or an "unknown type" placeholder when the
        type is not registered. The descriptor's ``id`` is applied either way.

    Raises
    ------
    Exception
        Anything raised by the renderer propagates unchanged.
    """
    if descriptor is None:
        return h("div")
    renderer = registry.get(descriptor.type)
    if renderer is None:
        node = unknown_section(descriptor.type)
    else:
        node = renderer.render(descriptor.data or EMPTY_DATA)
    if descriptor.id:
        node.id = descriptor.id
    return node


def try_render(
    descriptor: SectionDescriptor | None, registry: SectionRegistry
) -> RenderResult:
    """Render ``descriptor``, capturing renderer exceptions as a failure."""
    try:
        return Rendered(render_section(descriptor, registry))
    except Exception as exc:  # noqa: BLE001 - reported as RenderFailure
        return RenderFailure(
            section_type=descriptor.type if descriptor else "",
            message=str(exc) or type(exc).__name__,
            error=exc,
            section_id=descriptor.id if descriptor else None,
        )


__all__ = [
    "RenderFailure",
    "RenderResult",
    "Rendered",
    "error_block",
    "render_section",
    "try_render",
    "unknown_section",
]
