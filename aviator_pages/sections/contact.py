"""Contact form section wired to the form transport seam."""

from __future__ import annotations

from aviator_pages.dom import Element, Event, h
from aviator_pages.forms import FormSubmission, FormTransport, PlaceholderTransport

from .base import SectionData, SectionKind, mapping, text


class ContactFormSection:
    """Name/email/message form whose submission is intercepted locally."""

    kind = SectionKind.CONTACT_FORM

    def __init__(self, transport: FormTransport | None = None) -> None:
        self.transport = transport or PlaceholderTransport()

    def render(self, data: SectionData) -> Element:
        labels = mapping(data, "fields")
        button = mapping(data, "button")
        name_wrap, name = self._field("name", text(labels, "nameLabel", "Name"), "text")
        email_wrap, email = self._field(
            "email", text(labels, "emailLabel", "Email"), "email"
        )
        message_wrap, message = self._field(
            "message", text(labels, "messageLabel", "Message"), "textarea"
        )
        status = h("p", {"class": "form-status", "role": "status"})
        note = text(data, "note")

        def on_submit(event: Event) -> None:
            event.prevent_default()
            submission = FormSubmission(
                name=name.value, email=email.value, message=message.value
            )
            status.text_content = self.transport.submit(submission)

        form = h(
            "form",
            {"class": "form", "onSubmit": on_submit},
            [
                name_wrap,
                email_wrap,
                message_wrap,
                h(
                    "button",
                    {
                        "class": f"btn {text(button, 'variant', 'primary')}",
                        "type": "submit",
                    },
                    text(button, "label", "Send"),
                ),
                h("p", {"class": "note"}, note) if note else None,
                status,
            ],
        )
        container = h(
            "div",
            {"class": "container"},
            [
                h("h1", {}, text(data, "h1", "Contact")),
                h("p", {}, text(data, "subtitle")),
                form,
            ],
        )
        return h("section", {"class": "section legal"}, container)

    @staticmethod
    def _field(name: str, label: str, kind: str) -> tuple[Element, Element]:
        """Return a labelled field wrapper and its control."""
        control_id = f"contact-{name}"
        if kind == "textarea":
            control = h("textarea", {"id": control_id, "name": name, "placeholder": label})
        else:
            control = h(
                "input",
                {"id": control_id, "name": name, "type": kind, "placeholder": label},
            )
        wrap = h(
            "div", {"class": "field"}, [h("label", {"for": control_id}, label), control]
        )
        return wrap, control


__all__ = ["ContactFormSection"]
