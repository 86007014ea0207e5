from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from devnzo_tools.domain.validation import MAX_AMOUNT, require_non_negative


MAX_MARKUP_PERCENT = Decimal("1000000")


@dataclass(frozen=True, slots=True)
class MarginInput:
    cost: Decimal
    markup_percent: Decimal

    def validate(self) -> None:
        require_non_negative("cost", self.cost, maximum=MAX_AMOUNT)
        require_non_negative("markup_percent", self.markup_percent, maximum=MAX_MARKUP_PERCENT)


@dataclass(frozen=True, slots=True)
class MarginResult:
    sale_price: Decimal
    gross_profit: Decimal
    margin_percent: Decimal
