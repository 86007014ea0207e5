from decimal import Decimal

import pytest

from devnzo_tools.domain.errors import InvalidInputError
from devnzo_tools.domain.margin import MAX_MARKUP_PERCENT, MarginInput
from devnzo_tools.use_cases.compute_margin import ComputeMargin


# ============================================================================
# VALIDATION TESTS
# ============================================================================


def test_rejects_negative_cost():
    with pytest.raises(InvalidInputError, match="cost must be >= 0"):
        ComputeMargin().execute(MarginInput(cost=Decimal("-1"), markup_percent=Decimal("10")))


def test_rejects_negative_markup():
    with pytest.raises(InvalidInputError) as exc_info:
        ComputeMargin().execute(MarginInput(cost=Decimal("10"), markup_percent=Decimal("-10")))

    assert exc_info.value.field == "markup_percent"


def test_rejects_float_cost():
    with pytest.raises(InvalidInputError) as exc_info:
        ComputeMargin().execute(MarginInput(cost=9.99, markup_percent=Decimal("10")))

    assert exc_info.value.reason == "NOT_A_NUMBER"


# ============================================================================
# CALCULATION TESTS
# ============================================================================


def test_one_hundred_percent_markup_is_fifty_percent_margin():
    result = ComputeMargin().execute(MarginInput(cost=Decimal("50"), markup_percent=Decimal("100")))

    assert result.sale_price == Decimal("100")
    assert result.gross_profit == Decimal("50")
    assert result.margin_percent == Decimal("50")


def test_markup_derived_from_target_margin_round_trips():
    """A 30% margin on cost 70 needs a markup of 300/7 %."""
    markup = Decimal("100") / Decimal("7") * Decimal("3")

    result = ComputeMargin().execute(MarginInput(cost=Decimal("70"), markup_percent=markup))

    assert abs(result.sale_price - Decimal("100")) < Decimal("1e-20")
    assert abs(result.margin_percent - Decimal("30")) < Decimal("1e-20")


def test_zero_markup_means_zero_margin():
    result = ComputeMargin().execute(MarginInput(cost=Decimal("80"), markup_percent=Decimal("0")))

    assert result.sale_price == Decimal("80")
    assert result.gross_profit == 0
    assert result.margin_percent == 0


def test_zero_cost_gives_zero_margin_instead_of_dividing_by_zero():
    result = ComputeMargin().execute(MarginInput(cost=Decimal("0"), markup_percent=Decimal("40")))

    assert result.sale_price == 0
    assert result.margin_percent == 0


def test_margin_is_always_below_one_hundred_percent():
    result = ComputeMargin().execute(
        MarginInput(cost=Decimal("1"), markup_percent=Decimal("100000"))
    )

    assert Decimal("99.9") < result.margin_percent < Decimal("100")


def test_rejects_cost_above_maximum():
    with pytest.raises(InvalidInputError, match="cost must be <= 1000000000000000") as exc_info:
        ComputeMargin().execute(
            MarginInput(cost=Decimal("100000000000000000000000000"), markup_percent=Decimal("10"))
        )

    assert exc_info.value.reason == "OUT_OF_RANGE"


def test_rejects_markup_above_maximum():
    with pytest.raises(InvalidInputError) as exc_info:
        ComputeMargin().execute(
            MarginInput(cost=Decimal("10"), markup_percent=MAX_MARKUP_PERCENT + 1)
        )

    assert exc_info.value.field == "markup_percent"


def test_same_input_gives_identical_result():
    margin = MarginInput(cost=Decimal("19.99"), markup_percent=Decimal("37.5"))
    use_case = ComputeMargin()

    assert use_case.execute(margin) == use_case.execute(margin)
