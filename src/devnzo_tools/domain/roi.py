from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from devnzo_tools.domain.errors import InvalidInputError
from devnzo_tools.domain.validation import MAX_AMOUNT, require_non_negative, require_positive


DAYS_PER_YEAR = Decimal("365.25")


@dataclass(frozen=True, slots=True)
class RoiInput:
    amount_invested: Decimal
    amount_returned: Decimal
    start_date: date
    end_date: date

    def validate(self) -> None:
        require_positive("amount_invested", self.amount_invested, maximum=MAX_AMOUNT)
        require_non_negative("amount_returned", self.amount_returned, maximum=MAX_AMOUNT)
        if not isinstance(self.start_date, date):
            raise InvalidInputError.for_field(
                "start_date", "start_date must be a date", reason="REQUIRED"
            )
        if not isinstance(self.end_date, date):
            raise InvalidInputError.for_field(
                "end_date", "end_date must be a date", reason="REQUIRED"
            )
        if self.end_date <= self.start_date:
            raise InvalidInputError.for_field(
                "end_date",
                "end_date must be later than start_date",
                reason="INVALID_DATE_RANGE",
            )


@dataclass(frozen=True, slots=True)
class RoiResult:
    gain: Decimal
    roi_percent: Decimal
    length_years: Decimal
    annualized_roi_percent: Decimal
