from __future__ import annotations

import re
from dataclasses import dataclass

from devnzo_tools.domain.errors import InvalidInputError


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_FIELDS = ("name", "email", "subject", "message")


@dataclass(frozen=True, slots=True)
class ContactMessage:
    name: str
    email: str
    subject: str
    message: str
    phone: str | None = None
    company: str | None = None

    def validate(self) -> None:
        missing = [
            {"field": field, "message": f"{field} is required", "code": "REQUIRED"}
            for field in REQUIRED_FIELDS
            if not (getattr(self, field) or "").strip()
        ]
        if missing:
            raise InvalidInputError(errors=missing, message="Missing required fields")

        if not EMAIL_PATTERN.match(self.email):
            raise InvalidInputError.for_field(
                "email", "Invalid email address", reason="INVALID_EMAIL"
            )


@dataclass(frozen=True, slots=True)
class OutgoingEmail:
    """A rendered message ready for the transactional email provider."""

    to: str
    subject: str
    html_body: str
    reply_to: str | None = None
