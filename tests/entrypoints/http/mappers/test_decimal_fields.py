from __future__ import annotations

from decimal import Decimal

import pytest

from devnzo_tools.domain.errors import InvalidInputError
from devnzo_tools.entrypoints.http.mappers.decimal_fields import DecimalFieldParser, money


# ==============================================================================
# DecimalFieldParser
# ==============================================================================


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("10000", Decimal("10000")),
        ("0.30", Decimal("0.30")),
        ("  42.5 ", Decimal("42.5")),
        ("-3", Decimal("-3")),
        ("1e3", Decimal("1000")),
    ],
)
def test_parses_decimal_strings(raw: str, expected: Decimal) -> None:
    parser = DecimalFieldParser()

    assert parser.parse("amount", raw) == expected
    assert parser.errors == []
    parser.raise_if_errors()


@pytest.mark.parametrize("raw", ["ten", "", "   ", "1,000", "NaN", "Infinity", "1.2.3"])
def test_rejects_non_decimal_strings(raw: str) -> None:
    parser = DecimalFieldParser()

    assert parser.parse("amount", raw) == Decimal("0")
    assert parser.errors == [
        {"field": "amount", "message": f"Must be a valid decimal: {raw}", "code": "NOT_A_NUMBER"}
    ]


def test_collects_every_failing_field() -> None:
    parser = DecimalFieldParser()
    parser.parse("principal", "ten")
    parser.parse("annual_rate_percent", "10")
    parser.parse("other_fees", "n/a")

    with pytest.raises(InvalidInputError, match="Validation failed") as exc_info:
        parser.raise_if_errors()

    assert [error["field"] for error in exc_info.value.errors] == ["principal", "other_fees"]


# ==============================================================================
# money()
# ==============================================================================


def test_money_rounds_to_cents() -> None:
    assert money(Decimal("212.470399")) == "212.47"
    assert money(Decimal("0.005")) == "0.01"
    assert money(Decimal("61")) == "61.00"
