from pydantic import BaseModel, ConfigDict, Field

from devnzo_tools.domain.platform_fees import BillingCycle


class PlatformFeesRequestDTO(BaseModel):
    """Request payload for the platform fee calculator."""

    orders_per_month: int = Field(description="Orders per month", examples=[10], ge=0)
    avg_order_value: str = Field(
        description="Average order value as decimal string", examples=["100"], max_length=32
    )
    billing_cycle: BillingCycle = Field(default=BillingCycle.MONTHLY)
    uses_integrated_payments: bool = Field(
        default=True,
        description="Whether the platform's own payment processing is used",
    )
    external_gateway_percent: str = Field(
        default="2",
        description="External gateway rate in percent (ignored with integrated payments)",
        max_length=32,
    )
    external_gateway_fixed: str = Field(
        default="0.2",
        description="External gateway fixed fee per order (ignored with integrated payments)",
        max_length=32,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "orders_per_month": 10,
                "avg_order_value": "100",
                "billing_cycle": "monthly",
                "uses_integrated_payments": True,
            }
        }
    )


class PlanFeeDTO(BaseModel):
    tier_code: str = Field(examples=["basic"])
    tier_name: str = Field(examples=["Basic"])
    card_rate: str = Field(description="Integrated card rate", examples=["2.9% + 0.30"])
    plan_fee: str = Field(examples=["29.00"])
    integrated_payment_fee: str = Field(examples=["32.00"])
    external_payment_fee: str = Field(examples=["0.00"])
    platform_transaction_fee: str = Field(examples=["0.00"])
    total_cost: str = Field(examples=["61.00"])


class PlatformFeesResponseDTO(BaseModel):
    results: list[PlanFeeDTO]


class FeePlanDTO(BaseModel):
    code: str = Field(examples=["basic"])
    name: str = Field(examples=["Basic"])
    monthly_base_fee: str = Field(examples=["29.00"])
    yearly_base_fee: str = Field(
        description="Price of a year on yearly billing", examples=["261.00"]
    )
    card_rate_percent: str = Field(examples=["2.9"])
    card_rate_fixed: str = Field(examples=["0.30"])
    transaction_fee_percent_when_external: str = Field(examples=["2.0"])


class FeePlanListResponseDTO(BaseModel):
    plans: list[FeePlanDTO]
