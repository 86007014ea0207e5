from __future__ import annotations

import uuid

from devnzo_tools.domain.contact import OutgoingEmail
from devnzo_tools.ports.email_sender import EmailSender


class InMemoryEmailSender(EmailSender):
    """
    Records outgoing mail instead of delivering it.

    Used in tests and for local development without provider credentials.
    """

    def __init__(self) -> None:
        self.sent: list[tuple[str, OutgoingEmail]] = []

    def send(self, email: OutgoingEmail) -> str:
        message_id = f"local-{uuid.uuid4()}"
        self.sent.append((message_id, email))
        return message_id
