from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from devnzo_tools.domain.margin import MarginInput, MarginResult
from devnzo_tools.domain.money import HUNDRED, ONE, ZERO, calculation_context


@dataclass(frozen=True, slots=True)
class ComputeMargin:
    """Derive sale price, gross profit and margin from a cost and a markup."""

    def execute(self, margin: MarginInput) -> MarginResult:
        margin.validate()

        with calculation_context():
            cost = Decimal(margin.cost)
            sale_price = cost * (ONE + Decimal(margin.markup_percent) / HUNDRED)
            gross_profit = sale_price - cost
            # Only a zero cost gives a zero sale price
            margin_percent = ZERO if sale_price == 0 else gross_profit / sale_price * HUNDRED

        return MarginResult(
            sale_price=sale_price,
            gross_profit=gross_profit,
            margin_percent=margin_percent,
        )
