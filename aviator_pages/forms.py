"""Contact form submission seam.

The rendered contact form never navigates: its submit handler cancels the
default action and hands the collected values to a :class:`FormTransport`.
No transport ships with the site yet, so :class:`PlaceholderTransport` only
acknowledges the submission. An email or CRM integration plugs in here.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

logger = logging.getLogger(__name__)

PLACEHOLDER_ACKNOWLEDGEMENT = "Demo form. Next step: connect to email/CRM."


@dc.dataclass(frozen=True, slots=True)
class FormSubmission:
    """Values captured from the contact form at submit time."""

    name: str = ""
    email: str = ""
    message: str = ""


@typ.runtime_checkable
class FormTransport(typ.Protocol):
    """Delivers a form submission and returns a message for the visitor."""

    def submit(self, submission: FormSubmission) -> str:
        """Deliver ``submission``; return the acknowledgement to display."""
        ...


class PlaceholderTransport:
    """Transport used until a real backend is wired; performs no I/O."""

    def __init__(self) -> None:
        self.received: list[FormSubmission] = []

    def submit(self, submission: FormSubmission) -> str:
        self.received.append(submission)
        logger.info("Contact form submitted without a configured transport")
        return PLACEHOLDER_ACKNOWLEDGEMENT


__all__ = [
    "PLACEHOLDER_ACKNOWLEDGEMENT",
    "FormSubmission",
    "FormTransport",
    "PlaceholderTransport",
]
