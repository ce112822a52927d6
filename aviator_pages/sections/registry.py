"""Mapping from section type strings to their renderers."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .base import SectionKind, SectionRenderer
from .contact import ContactFormSection
from .providers import ProvidersGridSection
from .static import (
    Clock,
    CtaBannerSection,
    FaqAccordionSection,
    FeaturesCardsSection,
    HeroSection,
    HowItWorksSection,
    LegalTextSection,
    SeoIntroSection,
    SocialProofSection,
    TestimonialsSection,
    utc_today,
)

if typ.TYPE_CHECKING:
    from aviator_pages.forms import FormTransport


class RegistryError(ValueError):
    """Raised when renderers are registered inconsistently."""


class SectionRegistry:
    """Open registry of section renderers keyed by section type."""

    def __init__(self, renderers: cabc.Iterable[SectionRenderer] = ()) -> None:
        self._renderers: dict[str, SectionRenderer] = {}
        for renderer in renderers:
            self.register(renderer)

    def register(self, renderer: SectionRenderer, *, replace: bool = False) -> None:
        """Add ``renderer`` under its ``kind``.

        Raises
        ------
        RegistryError
            If another renderer already owns the kind and ``replace`` is false.
        """
        kind = str(renderer.kind)
        if kind in self._renderers and not replace:
            msg = f"Section type '{kind}' is already registered."
            raise RegistryError(msg)
        self._renderers[kind] = renderer

    def get(self, section_type: str | None) -> SectionRenderer | None:
        if section_type is None:
            return None
        return self._renderers.get(section_type)

    def __contains__(self, section_type: object) -> bool:
        return section_type in self._renderers

    def __len__(self) -> int:
        return len(self._renderers)

    def kinds(self) -> list[str]:
        return sorted(self._renderers)

    def unknown_types(self, section_types: cabc.Iterable[str]) -> list[str]:
        """Return the distinct unregistered types, in first-seen order."""
        unknown: list[str] = []
        for section_type in section_types:
            if section_type and section_type not in self and section_type not in unknown:
                unknown.append(section_type)
        return unknown

    def require(self, kinds: cabc.Iterable[str]) -> None:
        """Raise :class:`RegistryError` unless every kind has a renderer."""
        missing = [kind for kind in kinds if kind not in self]
        if missing:
            msg = f"No renderer registered for: {', '.join(missing)}"
            raise RegistryError(msg)


def default_registry(
    *, clock: Clock = utc_today, transport: FormTransport | None = None
) -> SectionRegistry:
    """Return a registry holding a renderer for every :class:`SectionKind`.

    Parameters
    ----------
    clock : Callable[[], date], optional
        Date source for ``{date}`` placeholders in legal text.
    transport : FormTransport, optional
        Submission transport for the contact form; defaults to the
        placeholder transport.
    """
    registry = SectionRegistry(
        [
            HeroSection(),
            SocialProofSection(),
            SeoIntroSection(),
            FeaturesCardsSection(),
            HowItWorksSection(),
            ProvidersGridSection(),
            TestimonialsSection(),
            FaqAccordionSection(),
            CtaBannerSection(),
            ContactFormSection(transport),
            LegalTextSection(clock),
        ]
    )
    registry.require(kind.value for kind in SectionKind)
    return registry


__all__ = ["RegistryError", "SectionRegistry", "default_registry"]
