"""Section kinds, the renderer protocol, and payload accessors.

Renderers receive the untyped ``data`` payload of a section descriptor. The
accessors here tolerate any shape: a missing or oddly typed field yields an
empty string, empty list, or documented default instead of an exception.
"""

from __future__ import annotations

import collections.abc as cabc
import enum
import typing as typ

if typ.TYPE_CHECKING:
    from aviator_pages.dom import Element

SectionData = cabc.Mapping[str, typ.Any]


class SectionKind(enum.StrEnum):
    """Built-in section types, keyed by their schema ``type`` string."""

    HERO = "hero.v1"
    SOCIAL_PROOF = "socialProof.v1"
    SEO_INTRO = "seoIntro.v1"
    FEATURES_CARDS = "featuresCards.v1"
    HOW_IT_WORKS = "howItWorks.v1"
    PROVIDERS_GRID = "providersGrid.v1"
    TESTIMONIALS = "testimonials.v1"
    FAQ_ACCORDION = "faqAccordion.v1"
    CTA_BANNER = "ctaBanner.v1"
    CONTACT_FORM = "contactForm.v1"
    LEGAL_TEXT = "legalText.v1"


@typ.runtime_checkable
class SectionRenderer(typ.Protocol):
    """Renders one section kind from its data payload."""

    kind: str

    def render(self, data: SectionData) -> Element:
        """Return the root element for a section with payload ``data``."""
        ...


def text(data: SectionData, key: str, default: str = "") -> str:
    """Return ``data[key]`` as a string, or ``default`` when absent or empty."""
    value = data.get(key)
    if value is None or value == "":
        return default
    return str(value)


def items(data: SectionData, key: str) -> list[typ.Any]:
    """Return ``data[key]`` as a list when it is a non-string sequence."""
    value = data.get(key)
    if isinstance(value, cabc.Sequence) and not isinstance(value, (str, bytes)):
        return list(value)
    return []


def mappings(data: SectionData, key: str) -> list[SectionData]:
    """Return the mapping entries of ``data[key]``, skipping anything else."""
    return [entry for entry in items(data, key) if isinstance(entry, cabc.Mapping)]


def mapping(data: SectionData, key: str) -> SectionData:
    """Return ``data[key]`` when it is a mapping, otherwise an empty mapping."""
    value = data.get(key)
    if isinstance(value, cabc.Mapping):
        return value
    return {}


__all__ = [
    "SectionData",
    "SectionKind",
    "SectionRenderer",
    "items",
    "mapping",
    "mappings",
    "text",
]
