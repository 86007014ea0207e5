from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from devnzo_tools.domain.loan import LoanBreakdown, LoanInput, LoanResult, PaymentFrequency
from devnzo_tools.domain.money import HUNDRED, ONE, ZERO, calculation_context


@dataclass(frozen=True, slots=True)
class ComputeLoan:
    """
    Compute payment, totals and fully-loaded cost of a business loan.

    Rounding policy:
    - All intermediate calculations use full precision Decimal
    - Nothing is rounded here; presentation layers round to cents

    APR is a linear annualization of interest plus fees over the term:
        apr = (total_interest + total_fees) / principal / term_years * 100
    It is not an IRR-based APR.
    """

    def execute(self, loan: LoanInput) -> LoanResult:
        loan.validate()

        with calculation_context():
            principal = Decimal(loan.principal)
            rate = Decimal(loan.annual_rate_percent) / HUNDRED
            m = Decimal(loan.compounding_frequency.periods_per_year)
            p = Decimal(loan.payment_frequency.payments_per_year)
            term_years = loan.total_term_years
            number_of_payments = term_years * p

            origination = principal * Decimal(loan.origination_fee_percent) / HUNDRED
            total_fees = origination + Decimal(loan.documentation_fee) + Decimal(loan.other_fees)

            if loan.payment_frequency is PaymentFrequency.LUMP_SUM_AT_END:
                # Whole balance compounds for the full term and is repaid once
                if rate == 0:
                    total_payments = principal
                else:
                    total_payments = principal * (ONE + rate / m) ** (m * term_years)
                payment_per_period = total_payments
                total_interest = total_payments - principal
                number_of_payments = ONE
            else:
                # Nominal rate compounded m times/year, expressed per payment period
                if rate == 0:
                    effective_rate = ZERO
                else:
                    effective_rate = (ONE + rate / m) ** (m / p) - ONE

                if loan.payment_frequency is PaymentFrequency.INTEREST_ONLY:
                    payment_per_period = principal * effective_rate
                    total_interest = payment_per_period * number_of_payments
                    total_payments = principal + total_interest
                else:
                    if effective_rate == 0:
                        payment_per_period = principal / number_of_payments
                    else:
                        payment_per_period = (
                            principal
                            * effective_rate
                            / (ONE - (ONE + effective_rate) ** -number_of_payments)
                        )
                    total_payments = payment_per_period * number_of_payments
                    total_interest = total_payments - principal

            apr = (total_interest + total_fees) / principal / term_years * HUNDRED

            grand_total = principal + total_interest + total_fees
            breakdown = LoanBreakdown(
                principal_share=principal / grand_total * HUNDRED,
                interest_share=total_interest / grand_total * HUNDRED,
                fee_share=total_fees / grand_total * HUNDRED,
            )

        return LoanResult(
            payment_frequency=loan.payment_frequency,
            payment_per_period=payment_per_period,
            number_of_payments=number_of_payments,
            total_payments=total_payments,
            total_interest=total_interest,
            total_fees=total_fees,
            apr=apr,
            breakdown=breakdown,
        )
