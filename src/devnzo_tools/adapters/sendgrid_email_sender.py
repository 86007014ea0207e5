"""SendGrid implementation of EmailSender."""

from __future__ import annotations

import logging

from python_http_client.exceptions import HTTPError
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Content, Email, Mail, ReplyTo, To

from devnzo_tools.domain.contact import OutgoingEmail
from devnzo_tools.domain.errors import EmailDeliveryError
from devnzo_tools.infra.email.config import ContactDeliverySettings
from devnzo_tools.ports.email_sender import EmailSender

logger = logging.getLogger(__name__)


class SendGridEmailSender(EmailSender):
    """
    Delivers mail through the SendGrid v3 API.

    The sender address is the configured inbox itself (a verified sender);
    replies go to the address in OutgoingEmail.reply_to.
    """

    def __init__(
        self, settings: ContactDeliverySettings, client: SendGridAPIClient | None = None
    ) -> None:
        self._settings = settings
        self._client = client
        if self._client is None and settings.sendgrid_api_key:
            self._client = SendGridAPIClient(settings.sendgrid_api_key)

    def send(self, email: OutgoingEmail) -> str:
        if self._client is None:
            raise EmailDeliveryError("SENDGRID_API_KEY environment variable is not set")
        if not self._settings.inbox_email:
            raise EmailDeliveryError("CONTACT_INBOX_EMAIL environment variable is not set")

        message = Mail(
            from_email=Email(self._settings.inbox_email, self._settings.from_name),
            to_emails=To(email.to),
            subject=email.subject,
            html_content=Content("text/html", email.html_body),
        )
        if email.reply_to:
            message.reply_to = ReplyTo(email.reply_to)

        try:
            response = self._client.send(message)
        except HTTPError as exc:
            logger.error(
                "SendGrid rejected message",
                extra={"status_code": exc.status_code, "subject": email.subject},
            )
            raise EmailDeliveryError("Email provider rejected the message") from exc
        except OSError as exc:
            logger.error("SendGrid unreachable", exc_info=exc)
            raise EmailDeliveryError("Email provider is unreachable") from exc

        if not 200 <= response.status_code < 300:
            raise EmailDeliveryError(
                "Email provider rejected the message", status_code=response.status_code
            )

        message_id = response.headers.get("X-Message-Id", "")
        logger.info(
            "Email accepted by SendGrid",
            extra={"message_id": message_id, "status_code": response.status_code},
        )
        return message_id
