from __future__ import annotations

from decimal import Decimal, InvalidOperation

from devnzo_tools.domain.errors import InvalidInputError
from devnzo_tools.domain.money import to_cents


class DecimalFieldParser:
    """
    Strict string → Decimal parsing for request fields.

    Collects every unparseable field so the client sees all of them at once,
    then raises a single InvalidInputError from ``raise_if_errors``.
    """

    def __init__(self) -> None:
        self.errors: list[dict[str, str]] = []

    def parse(self, field: str, raw: str) -> Decimal:
        try:
            value = Decimal(raw.strip())
        except (InvalidOperation, ValueError):
            value = None

        if value is None or not value.is_finite():
            self.errors.append(
                {
                    "field": field,
                    "message": f"Must be a valid decimal: {raw}",
                    "code": "NOT_A_NUMBER",
                }
            )
            return Decimal("0")  # Placeholder to continue validation

        return value

    def raise_if_errors(self) -> None:
        if self.errors:
            raise InvalidInputError(errors=self.errors, message="Validation failed")


def money(value: Decimal) -> str:
    """Decimal → string at the presentation boundary, rounded to cents."""
    return str(to_cents(value))
