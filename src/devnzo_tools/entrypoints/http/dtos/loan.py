from pydantic import BaseModel, ConfigDict, Field

from devnzo_tools.domain.loan import CompoundingFrequency, PaymentFrequency


class LoanRequestDTO(BaseModel):
    """Request payload for the business loan calculator."""

    principal: str = Field(
        description="Loan amount as decimal string",
        examples=["10000"],
        max_length=32,
    )
    annual_rate_percent: str = Field(
        description="Nominal annual interest rate in percent (e.g., '10' = 10%)",
        examples=["10"],
        max_length=32,
    )
    term_years: int = Field(default=0, description="Loan term, whole years", examples=[5], ge=0)
    term_months: int = Field(
        default=0, description="Loan term, additional months", examples=[0], ge=0
    )
    compounding_frequency: CompoundingFrequency = Field(
        default=CompoundingFrequency.MONTHLY,
        description="How often interest compounds",
    )
    payment_frequency: PaymentFrequency = Field(
        default=PaymentFrequency.MONTHLY,
        description="Payback schedule; 'interest_only' and 'lump_sum_at_end' are special modes",
    )
    origination_fee_percent: str = Field(
        default="0",
        description="Origination fee as a percent of the principal",
        examples=["5"],
        max_length=32,
    )
    documentation_fee: str = Field(
        default="0", description="Flat documentation fee", examples=["750"], max_length=32
    )
    other_fees: str = Field(
        default="0", description="Any other flat fees", examples=["0"], max_length=32
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "principal": "10000",
                "annual_rate_percent": "10",
                "term_years": 5,
                "term_months": 0,
                "compounding_frequency": "monthly",
                "payment_frequency": "monthly",
                "origination_fee_percent": "5",
                "documentation_fee": "750",
                "other_fees": "0",
            }
        }
    )


class LoanBreakdownDTO(BaseModel):
    principal_share: str = Field(description="Principal share in percent", examples=["71.44"])
    interest_share: str = Field(description="Interest share in percent", examples=["19.63"])
    fee_share: str = Field(description="Fee share in percent", examples=["8.93"])


class LoanResponseDTO(BaseModel):
    """Loan calculator result. Every amount is a decimal string rounded to cents."""

    payment_frequency: PaymentFrequency
    payment_per_period: str = Field(examples=["212.47"])
    number_of_payments: str = Field(examples=["60.00"])
    total_payments: str = Field(examples=["12748.23"])
    total_interest: str = Field(examples=["2748.23"])
    total_fees: str = Field(examples=["1250.00"])
    apr: str = Field(
        description="Interest plus fees per year as a percent of principal (not IRR-based)",
        examples=["8.00"],
    )
    breakdown: LoanBreakdownDTO
