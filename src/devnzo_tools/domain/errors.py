"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to HTTP responses by the entrypoint adapters.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains business error information that
    can be translated to HTTP (or any other protocol) formats.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Used for domain invariant violations and cross-field validation.

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "principal", "message": "Must be > 0"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class InvalidInputError(ValidationError):
    """Calculator input rejected before any arithmetic runs.

    Carries one entry per failing field. ``field`` and ``reason`` expose the
    first failure for callers that only render a single message.

    Reason codes:
        - NOT_A_NUMBER: value could not be parsed as a decimal
        - OUT_OF_RANGE: value parsed but violates a bound (e.g. <= 0)
        - INVALID_DATE_RANGE: end date is not after start date
        - REQUIRED: a mandatory field is missing or blank
        - INVALID_EMAIL: value does not look like an email address

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    def __init__(self, errors: list[dict[str, str]], message: str | None = None) -> None:
        if not errors:
            raise ValueError("InvalidInputError requires at least one field error")
        super().__init__(message=message or errors[0]["message"], errors=errors)
        self.field_errors: list[dict[str, str]] = errors

    @classmethod
    def for_field(cls, field: str, message: str, reason: str = "OUT_OF_RANGE") -> "InvalidInputError":
        return cls(errors=[{"field": field, "message": message, "code": reason}])

    @property
    def field(self) -> str:
        return self.field_errors[0]["field"]

    @property
    def reason(self) -> str:
        return self.field_errors[0]["code"]


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Fee plan with code not found

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "FeePlan")
            identifier: Resource identifier (e.g., plan code)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class InternalError(DomainError):
    """Internal domain error (unexpected conditions).

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"


class EmailDeliveryError(InternalError):
    """The transactional email provider did not accept a message.

    Protocol mappings:
        - REST: 502 Bad Gateway
    """

    error_code: str = "EMAIL_DELIVERY_FAILED"
