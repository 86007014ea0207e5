from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ContactDeliverySettings:
    sendgrid_api_key: str | None
    inbox_email: str | None
    from_name: str


def contact_delivery_settings() -> ContactDeliverySettings:
    """Read contact form delivery settings from the environment.

    Missing values are not an error here: the sender reports them when a
    message is actually sent, so calculator-only deployments need no mail setup.
    """
    return ContactDeliverySettings(
        sendgrid_api_key=os.getenv("SENDGRID_API_KEY") or None,
        inbox_email=os.getenv("CONTACT_INBOX_EMAIL") or None,
        from_name=os.getenv("CONTACT_FROM_NAME", "Devnzo Contact Form"),
    )
