"""Send contact form submissions to the support inbox."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from html import escape

from devnzo_tools.domain.contact import ContactMessage, OutgoingEmail
from devnzo_tools.domain.errors import EmailDeliveryError
from devnzo_tools.ports.email_sender import EmailSender

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ContactDelivery:
    message_id: str


def render_contact_email(contact: ContactMessage) -> str:
    """Render a submission as an HTML email body. Every user value is escaped."""
    rows = [("Name", escape(contact.name)), ("Email", _mailto(contact.email))]
    if contact.phone:
        rows.append(("Phone", escape(contact.phone)))
    if contact.company:
        rows.append(("Company", escape(contact.company)))
    rows.append(("Subject", escape(contact.subject)))
    rows.append(("Message", escape(contact.message).replace("\n", "<br>")))

    fields = "\n".join(
        f'<div class="field"><div class="label">{label}:</div>'
        f'<div class="value">{value}</div></div>'
        for label, value in rows
    )
    return (
        "<!DOCTYPE html>\n"
        '<html><head><meta charset="UTF-8"></head><body>\n'
        "<h1>New Contact Form Submission</h1>\n"
        "<p>Devnzo Support</p>\n"
        f"{fields}\n"
        "<p>Sent via Devnzo Contact Form</p>\n"
        "</body></html>"
    )


def _mailto(address: str) -> str:
    safe = escape(address)
    return f'<a href="mailto:{safe}">{safe}</a>'


class SendContactMessage:
    """
    Validate a contact form submission and deliver it to the support inbox.

    Responsibilities:
    - Validate required fields and email shape (InvalidInputError)
    - Render the HTML body
    - Deliver through the EmailSender port with Reply-To set to the submitter
    """

    def __init__(self, email_sender: EmailSender, inbox_email: str | None) -> None:
        self._sender = email_sender
        self._inbox_email = inbox_email

    def execute(self, contact: ContactMessage) -> ContactDelivery:
        contact.validate()

        if not self._inbox_email:
            raise EmailDeliveryError("CONTACT_INBOX_EMAIL environment variable is not set")

        email = OutgoingEmail(
            to=self._inbox_email,
            subject=f"New Contact: {contact.subject}",
            html_body=render_contact_email(contact),
            reply_to=contact.email,
        )

        logger.info("Sending contact form email", extra={"subject": contact.subject})
        message_id = self._sender.send(email)
        logger.info("Contact form email sent", extra={"message_id": message_id})

        return ContactDelivery(message_id=message_id)
