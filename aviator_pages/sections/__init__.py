"""Section renderers and the registry that dispatches to them."""

from .base import SectionData, SectionKind, SectionRenderer
from .contact import ContactFormSection
from .providers import ProvidersGrid, ProvidersGridSection
from .registry import RegistryError, SectionRegistry, default_registry
from .static import (
    CtaBannerSection,
    FaqAccordionSection,
    FeaturesCardsSection,
    HeroSection,
    HowItWorksSection,
    LegalTextSection,
    SeoIntroSection,
    SocialProofSection,
    TestimonialsSection,
)

__all__ = [
    "ContactFormSection",
    "CtaBannerSection",
    "FaqAccordionSection",
    "FeaturesCardsSection",
    "HeroSection",
    "HowItWorksSection",
    "LegalTextSection",
    "ProvidersGrid",
    "ProvidersGridSection",
    "RegistryError",
    "SectionData",
    "SectionKind",
    "SectionRegistry",
    "SectionRenderer",
    "SeoIntroSection",
    "SocialProofSection",
    "TestimonialsSection",
    "default_registry",
]
