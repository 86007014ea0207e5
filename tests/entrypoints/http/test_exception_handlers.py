"""Tests for FastAPI exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from devnzo_tools.domain.errors import (
    DomainError,
    EmailDeliveryError,
    InternalError,
    InvalidInputError,
    NotFoundError,
    ValidationError,
)
from devnzo_tools.entrypoints.http.exception_handlers import register_exception_handlers


@pytest.fixture
def app() -> FastAPI:
    """Create a minimal FastAPI app with exception handlers registered."""
    test_app = FastAPI()
    register_exception_handlers(test_app)

    # Add test routes that raise different errors
    @test_app.get("/validation-error")
    def raise_validation_error() -> None:
        raise ValidationError("Validation failed")

    @test_app.get("/invalid-input")
    def raise_invalid_input() -> None:
        raise InvalidInputError(
            errors=[
                {
                    "field": "principal",
                    "message": "Must be a valid decimal: ten",
                    "code": "NOT_A_NUMBER",
                },
                {
                    "field": "other_fees",
                    "message": "Must be a valid decimal: n/a",
                    "code": "NOT_A_NUMBER",
                },
            ],
            message="Validation failed",
        )

    @test_app.get("/date-range")
    def raise_date_range() -> None:
        raise InvalidInputError.for_field(
            "end_date", "end_date must be later than start_date", reason="INVALID_DATE_RANGE"
        )

    @test_app.get("/not-found-error")
    def raise_not_found_error() -> None:
        raise NotFoundError("FeePlan", "enterprise")

    @test_app.get("/domain-error")
    def raise_domain_error() -> None:
        raise DomainError("Something the domain refused")

    @test_app.get("/email-delivery-error")
    def raise_email_delivery_error() -> None:
        raise EmailDeliveryError("Email provider is unreachable")

    @test_app.get("/internal-error")
    def raise_internal_error() -> dict:
        raise InternalError("Unexpected condition")

    @test_app.get("/value-error")
    def raise_value_error() -> dict:
        raise ValueError("Invalid decimal format")

    @test_app.get("/unexpected-error")
    def raise_unexpected_error() -> dict:
        raise RuntimeError("Something went wrong")

    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


class TestValidationErrorHandler:
    """Tests for ValidationError and InvalidInputError handling."""

    def test_simple_validation_error_returns_422(self, client: TestClient) -> None:
        """ValidationError returns 422 with structured error."""
        response = client.get("/validation-error")

        assert response.status_code == 422
        assert response.json() == {
            "detail": "Validation failed",
            "code": "VALIDATION_ERROR",
        }

    def test_invalid_input_lists_every_field(self, client: TestClient) -> None:
        """All unparseable fields are reported in one response."""
        response = client.get("/invalid-input")

        assert response.status_code == 422
        data = response.json()

        assert data["detail"] == "Validation failed"
        assert data["code"] == "VALIDATION_ERROR"
        assert [error["field"] for error in data["errors"]] == ["principal", "other_fees"]
        assert {error["code"] for error in data["errors"]} == {"NOT_A_NUMBER"}

    def test_single_field_error_uses_its_message_as_detail(self, client: TestClient) -> None:
        response = client.get("/date-range")

        assert response.status_code == 422
        assert response.json() == {
            "detail": "end_date must be later than start_date",
            "code": "VALIDATION_ERROR",
            "errors": [
                {
                    "field": "end_date",
                    "message": "end_date must be later than start_date",
                    "code": "INVALID_DATE_RANGE",
                }
            ],
        }


class TestNotFoundErrorHandler:
    """Tests for NotFoundError exception handler."""

    def test_not_found_error_returns_404(self, client: TestClient) -> None:
        """NotFoundError returns 404 with structured error."""
        response = client.get("/not-found-error")

        assert response.status_code == 404
        assert response.json() == {
            "detail": "FeePlan with identifier 'enterprise' not found",
            "code": "NOT_FOUND",
        }


class TestOtherDomainErrors:
    """Error codes without a specific mapping."""

    def test_unmapped_domain_error_returns_400(self, client: TestClient) -> None:
        response = client.get("/domain-error")

        assert response.status_code == 400
        assert response.json() == {
            "detail": "Something the domain refused",
            "code": "DOMAIN_ERROR",
        }


class TestServerSideErrors:
    """Tests for errors that are not the client's fault."""

    def test_email_delivery_error_returns_502(self, client: TestClient) -> None:
        response = client.get("/email-delivery-error")

        assert response.status_code == 502
        assert response.json() == {
            "detail": "Email provider is unreachable",
            "code": "EMAIL_DELIVERY_FAILED",
        }

    def test_internal_error_returns_500(self, client: TestClient) -> None:
        """InternalError returns 500 with structured error."""
        response = client.get("/internal-error")

        assert response.status_code == 500
        assert response.json()["code"] == "INTERNAL_ERROR"

    def test_server_errors_are_logged_at_error_level(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level("INFO", logger="devnzo_tools.entrypoints.http.exception_handlers"):
            client.get("/email-delivery-error")
            client.get("/not-found-error")

        levels = {record.getMessage(): record.levelname for record in caplog.records}
        assert levels["Domain error occurred"] == "ERROR"
        assert levels["Client error"] == "INFO"


class TestValueErrorHandler:
    """Tests for ValueError exception handler."""

    def test_value_error_returns_422(self, client: TestClient) -> None:
        """ValueError returns 422 with structured error."""
        response = client.get("/value-error")

        assert response.status_code == 422
        assert response.json() == {
            "detail": "Invalid decimal format",
            "code": "INVALID_VALUE",
        }


class TestUnexpectedErrorHandler:
    """Tests for unexpected exception handler."""

    def test_unexpected_error_returns_500(self, client: TestClient) -> None:
        """Unexpected errors return 500 with generic message."""
        response = client.get("/unexpected-error")

        assert response.status_code == 500
        assert response.json() == {
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }


class TestPydanticValidationErrors:
    """Tests for Pydantic/FastAPI validation error handling."""

    def test_pydantic_validation_error_returns_422(self) -> None:
        """Pydantic validation errors return 422 with structured errors."""
        from fastapi import Query

        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/test")
        def test_route(orders: int = Query(default=0, ge=0)) -> dict:
            return {"orders": orders}

        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/test?orders=-5")

        assert response.status_code == 422
        data = response.json()

        assert data["detail"] == "Invalid request parameters"
        assert data["code"] == "VALIDATION_ERROR"
        assert data["errors"][0]["field"] == "orders"

    def test_pydantic_missing_required_field_returns_422(self) -> None:
        """Missing body fields are reported without the 'body' prefix."""
        from pydantic import BaseModel

        app = FastAPI()
        register_exception_handlers(app)

        class RequestBody(BaseModel):
            principal: str

        @app.post("/test")
        def test_route(body: RequestBody) -> dict:
            return {"principal": body.principal}

        client = TestClient(app, raise_server_exceptions=False)

        response = client.post("/test", json={})

        assert response.status_code == 422
        data = response.json()

        assert data["code"] == "VALIDATION_ERROR"
        assert data["errors"] == [
            {"field": "principal", "message": "Field required", "code": "missing"}
        ]


class TestErrorResponseFormat:
    """Tests for error response format consistency."""

    def test_all_errors_have_detail_and_code(self, client: TestClient) -> None:
        """All error responses have 'detail' and 'code' fields."""
        endpoints = [
            "/validation-error",
            "/invalid-input",
            "/not-found-error",
            "/domain-error",
            "/email-delivery-error",
            "/value-error",
            "/unexpected-error",
        ]

        for endpoint in endpoints:
            response = client.get(endpoint)
            data = response.json()

            assert "detail" in data, f"{endpoint} missing 'detail'"
            assert "code" in data, f"{endpoint} missing 'code'"
            assert isinstance(data["detail"], str)
            assert isinstance(data["code"], str)
