from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from devnzo_tools.domain.money import HUNDRED, ONE, calculation_context
from devnzo_tools.domain.roi import DAYS_PER_YEAR, RoiInput, RoiResult


@dataclass(frozen=True, slots=True)
class ComputeRoi:
    """
    Compute absolute and annualized return of an investment.

    Annualized ROI is the geometric rate that compounds to the same total
    return over the holding period:
        ((returned / invested) ** (1 / years) - 1) * 100
    Holding period length is measured in days over 365.25.
    """

    def execute(self, roi: RoiInput) -> RoiResult:
        roi.validate()

        with calculation_context():
            invested = Decimal(roi.amount_invested)
            returned = Decimal(roi.amount_returned)

            gain = returned - invested
            roi_percent = gain / invested * HUNDRED

            length_days = Decimal((roi.end_date - roi.start_date).days)
            length_years = length_days / DAYS_PER_YEAR

            growth = returned / invested
            # A total loss has no root to take: it annualizes to -100%
            if growth == 0:
                annualized_roi_percent = -HUNDRED
            else:
                annualized_roi_percent = (growth ** (ONE / length_years) - ONE) * HUNDRED

        return RoiResult(
            gain=gain,
            roi_percent=roi_percent,
            length_years=length_years,
            annualized_roi_percent=annualized_roi_percent,
        )
