"""Field guards shared by the calculator inputs.

Monetary and rate values must arrive as ``Decimal`` (or ``int``) once past the
HTTP boundary. Floats, bools and non-finite decimals are rejected so no
binary floating point leaks into the arithmetic.

Magnitudes are bounded as well. Inside these limits every calculator result
stays within the decimal context's exponent range.
"""

from __future__ import annotations

from decimal import Decimal

from devnzo_tools.domain.errors import InvalidInputError


MAX_AMOUNT = Decimal("1000000000000000")
MAX_RATE_PERCENT = Decimal("1000")
# Non-zero values closer to zero than this are rejected
MIN_MAGNITUDE = Decimal("0.000000000001")


def as_decimal(field: str, value: object) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (Decimal, int)):
        raise InvalidInputError.for_field(
            field, f"{field} must be a decimal number", reason="NOT_A_NUMBER"
        )
    number = Decimal(value)
    if not number.is_finite():
        raise InvalidInputError.for_field(
            field, f"{field} must be a finite number", reason="NOT_A_NUMBER"
        )
    if number != 0 and abs(number) < MIN_MAGNITUDE:
        raise InvalidInputError.for_field(field, f"{field} is too close to zero")
    return number


def require_at_most(field: str, number: Decimal, maximum: Decimal | None) -> Decimal:
    if maximum is not None and number > maximum:
        raise InvalidInputError.for_field(field, f"{field} must be <= {maximum}")
    return number


def require_positive(field: str, value: object, maximum: Decimal | None = None) -> Decimal:
    number = as_decimal(field, value)
    if number <= 0:
        raise InvalidInputError.for_field(field, f"{field} must be > 0")
    return require_at_most(field, number, maximum)


def require_non_negative(field: str, value: object, maximum: Decimal | None = None) -> Decimal:
    number = as_decimal(field, value)
    if number < 0:
        raise InvalidInputError.for_field(field, f"{field} must be >= 0")
    return require_at_most(field, number, maximum)


def require_non_negative_int(field: str, value: object, maximum: int | None = None) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError.for_field(
            field, f"{field} must be a whole number", reason="NOT_A_NUMBER"
        )
    if value < 0:
        raise InvalidInputError.for_field(field, f"{field} must be >= 0")
    if maximum is not None and value > maximum:
        raise InvalidInputError.for_field(field, f"{field} must be <= {maximum}")
    return value
