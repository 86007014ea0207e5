from __future__ import annotations

from devnzo_tools.domain.loan import LoanInput, LoanResult
from devnzo_tools.entrypoints.http.dtos.loan import (
    LoanBreakdownDTO,
    LoanRequestDTO,
    LoanResponseDTO,
)
from devnzo_tools.entrypoints.http.mappers.decimal_fields import DecimalFieldParser, money


class LoanMapper:
    """Maps between REST DTOs and domain models for the loan calculator."""

    @staticmethod
    def to_domain_request(dto: LoanRequestDTO) -> LoanInput:
        """
        Converts request DTO to domain LoanInput.

        Raises:
            InvalidInputError: If any amount cannot be parsed as a decimal
        """
        parser = DecimalFieldParser()

        principal = parser.parse("principal", dto.principal)
        annual_rate_percent = parser.parse("annual_rate_percent", dto.annual_rate_percent)
        origination_fee_percent = parser.parse(
            "origination_fee_percent", dto.origination_fee_percent
        )
        documentation_fee = parser.parse("documentation_fee", dto.documentation_fee)
        other_fees = parser.parse("other_fees", dto.other_fees)

        parser.raise_if_errors()

        return LoanInput(
            principal=principal,
            annual_rate_percent=annual_rate_percent,
            term_years=dto.term_years,
            term_months=dto.term_months,
            compounding_frequency=dto.compounding_frequency,
            payment_frequency=dto.payment_frequency,
            origination_fee_percent=origination_fee_percent,
            documentation_fee=documentation_fee,
            other_fees=other_fees,
        )

    @staticmethod
    def to_response(result: LoanResult) -> LoanResponseDTO:
        """Converts domain LoanResult to response DTO, rounding to cents."""
        return LoanResponseDTO(
            payment_frequency=result.payment_frequency,
            payment_per_period=money(result.payment_per_period),
            number_of_payments=money(result.number_of_payments),
            total_payments=money(result.total_payments),
            total_interest=money(result.total_interest),
            total_fees=money(result.total_fees),
            apr=money(result.apr),
            breakdown=LoanBreakdownDTO(
                principal_share=money(result.breakdown.principal_share),
                interest_share=money(result.breakdown.interest_share),
                fee_share=money(result.breakdown.fee_share),
            ),
        )
