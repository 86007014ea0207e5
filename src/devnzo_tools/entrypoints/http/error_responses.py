"""REST API error response models.

Every error body has the same shape so form-driven clients can render
field-level messages without special cases.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "principal",
                "message": "principal must be > 0",
                "code": "OUT_OF_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {"detail": "FeePlan with identifier 'pro' not found", "code": "NOT_FOUND"}

        Calculator input rejected:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "principal", "message": "Must be a valid decimal: ten", "code": "NOT_A_NUMBER"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "FeePlan with identifier 'pro' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
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
                },
                {
                    "detail": "end_date must be later than start_date",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "end_date",
                            "message": "end_date must be later than start_date",
                            "code": "INVALID_DATE_RANGE",
                        }
                    ],
                },
            ]
        }
    )
