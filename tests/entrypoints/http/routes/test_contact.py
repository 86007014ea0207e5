"""
Test suite for POST /v1/contact.

The email provider is replaced by InMemoryEmailSender through dependency
overrides, so the full validate → render → send path runs without network.
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from devnzo_tools.adapters.in_memory_email_sender import InMemoryEmailSender
from devnzo_tools.domain.errors import EmailDeliveryError
from devnzo_tools.entrypoints.http.dependencies import get_send_contact_message_use_case
from devnzo_tools.entrypoints.http.exception_handlers import register_exception_handlers
from devnzo_tools.entrypoints.http.routes.contact import router
from devnzo_tools.use_cases.send_contact_message import SendContactMessage


INBOX = "support@devnzo.com"


@pytest.fixture
def sender() -> InMemoryEmailSender:
    return InMemoryEmailSender()


@pytest.fixture
def app(sender: InMemoryEmailSender) -> FastAPI:
    """Create a test FastAPI app with the contact router and an in-memory sender."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_send_contact_message_use_case] = lambda: SendContactMessage(
        email_sender=sender, inbox_email=INBOX
    )
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def payload() -> dict:
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "subject": "Bulk pricing",
        "message": "Do you offer discounts?",
        "company": "Analytical Engines Ltd",
    }


def test_contact_success(client: TestClient, sender: InMemoryEmailSender, payload: dict) -> None:
    response = client.post("/v1/contact", json=payload)

    assert response.status_code == 200
    [(message_id, email)] = sender.sent
    assert response.json() == {
        "success": True,
        "message": "Email sent successfully",
        "message_id": message_id,
    }
    assert email.to == INBOX
    assert email.subject == "New Contact: Bulk pricing"
    assert email.reply_to == "ada@example.com"
    assert "Analytical Engines Ltd" in email.html_body


def test_contact_missing_fields(client: TestClient, sender: InMemoryEmailSender) -> None:
    response = client.post("/v1/contact", json={"name": "Ada"})

    assert response.status_code == 422
    data = response.json()
    assert data["detail"] == "Missing required fields"
    assert [error["field"] for error in data["errors"]] == ["email", "subject", "message"]
    assert sender.sent == []


def test_contact_invalid_email(client: TestClient, payload: dict) -> None:
    payload["email"] = "ada-at-example"

    response = client.post("/v1/contact", json=payload)

    assert response.status_code == 422
    assert response.json()["errors"] == [
        {"field": "email", "message": "Invalid email address", "code": "INVALID_EMAIL"}
    ]


def test_contact_provider_failure_returns_502(app: FastAPI, client: TestClient, payload: dict) -> None:
    failing_sender = Mock()
    failing_sender.send.side_effect = EmailDeliveryError("Email provider is unreachable")
    app.dependency_overrides[get_send_contact_message_use_case] = lambda: SendContactMessage(
        email_sender=failing_sender, inbox_email=INBOX
    )

    response = client.post("/v1/contact", json=payload)

    assert response.status_code == 502
    assert response.json() == {
        "detail": "Email provider is unreachable",
        "code": "EMAIL_DELIVERY_FAILED",
    }
