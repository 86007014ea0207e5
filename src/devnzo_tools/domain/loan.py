from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from devnzo_tools.domain.errors import InvalidInputError
from devnzo_tools.domain.validation import (
    MAX_AMOUNT,
    MAX_RATE_PERCENT,
    require_non_negative,
    require_non_negative_int,
    require_positive,
)


# A century of monthly payments
MAX_TERM_MONTHS = 1200


class CompoundingFrequency(str, Enum):
    ANNUALLY = "annually"
    SEMI_ANNUALLY = "semi_annually"
    QUARTERLY = "quarterly"
    MONTHLY = "monthly"
    SEMI_MONTHLY = "semi_monthly"
    BIWEEKLY = "biweekly"
    WEEKLY = "weekly"
    DAILY = "daily"

    @property
    def periods_per_year(self) -> int:
        return _COMPOUNDING_PERIODS_PER_YEAR[self]


class PaymentFrequency(str, Enum):
    MONTHLY = "monthly"
    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    SEMI_MONTHLY = "semi_monthly"
    QUARTERLY = "quarterly"
    SEMI_ANNUALLY = "semi_annually"
    ANNUALLY = "annually"
    INTEREST_ONLY = "interest_only"
    LUMP_SUM_AT_END = "lump_sum_at_end"

    @property
    def payments_per_year(self) -> int:
        return _PAYMENTS_PER_YEAR[self]


_COMPOUNDING_PERIODS_PER_YEAR: dict[CompoundingFrequency, int] = {
    CompoundingFrequency.ANNUALLY: 1,
    CompoundingFrequency.SEMI_ANNUALLY: 2,
    CompoundingFrequency.QUARTERLY: 4,
    CompoundingFrequency.MONTHLY: 12,
    CompoundingFrequency.SEMI_MONTHLY: 24,
    CompoundingFrequency.BIWEEKLY: 26,
    CompoundingFrequency.WEEKLY: 52,
    CompoundingFrequency.DAILY: 365,
}

# Interest-only accrues on the monthly schedule; a lump sum is a single payment.
_PAYMENTS_PER_YEAR: dict[PaymentFrequency, int] = {
    PaymentFrequency.MONTHLY: 12,
    PaymentFrequency.DAILY: 365,
    PaymentFrequency.WEEKLY: 52,
    PaymentFrequency.BIWEEKLY: 26,
    PaymentFrequency.SEMI_MONTHLY: 24,
    PaymentFrequency.QUARTERLY: 4,
    PaymentFrequency.SEMI_ANNUALLY: 2,
    PaymentFrequency.ANNUALLY: 1,
    PaymentFrequency.INTEREST_ONLY: 12,
    PaymentFrequency.LUMP_SUM_AT_END: 1,
}


@dataclass(frozen=True, slots=True)
class LoanInput:
    principal: Decimal
    annual_rate_percent: Decimal
    term_years: int
    term_months: int = 0
    compounding_frequency: CompoundingFrequency = CompoundingFrequency.MONTHLY
    payment_frequency: PaymentFrequency = PaymentFrequency.MONTHLY
    origination_fee_percent: Decimal = Decimal("0")
    documentation_fee: Decimal = Decimal("0")
    other_fees: Decimal = Decimal("0")

    @property
    def total_term_months(self) -> int:
        return self.term_years * 12 + self.term_months

    @property
    def total_term_years(self) -> Decimal:
        return Decimal(self.total_term_months) / Decimal("12")

    def validate(self) -> None:
        require_positive("principal", self.principal, maximum=MAX_AMOUNT)
        require_non_negative(
            "annual_rate_percent", self.annual_rate_percent, maximum=MAX_RATE_PERCENT
        )
        require_non_negative_int("term_years", self.term_years)
        require_non_negative_int("term_months", self.term_months)
        if self.total_term_months <= 0:
            raise InvalidInputError.for_field("term_years", "loan term must be longer than zero")
        if self.total_term_months > MAX_TERM_MONTHS:
            raise InvalidInputError.for_field(
                "term_years", f"loan term must be at most {MAX_TERM_MONTHS} months"
            )
        if not isinstance(self.compounding_frequency, CompoundingFrequency):
            raise InvalidInputError.for_field(
                "compounding_frequency", "compounding_frequency is not supported"
            )
        if not isinstance(self.payment_frequency, PaymentFrequency):
            raise InvalidInputError.for_field(
                "payment_frequency", "payment_frequency is not supported"
            )
        require_non_negative(
            "origination_fee_percent", self.origination_fee_percent, maximum=MAX_RATE_PERCENT
        )
        require_non_negative("documentation_fee", self.documentation_fee, maximum=MAX_AMOUNT)
        require_non_negative("other_fees", self.other_fees, maximum=MAX_AMOUNT)


@dataclass(frozen=True, slots=True)
class LoanBreakdown:
    """Shares (in percent) of principal + total interest + total fees."""

    principal_share: Decimal
    interest_share: Decimal
    fee_share: Decimal


@dataclass(frozen=True, slots=True)
class LoanResult:
    payment_frequency: PaymentFrequency
    payment_per_period: Decimal
    number_of_payments: Decimal
    total_payments: Decimal
    total_interest: Decimal
    total_fees: Decimal
    apr: Decimal
    breakdown: LoanBreakdown
