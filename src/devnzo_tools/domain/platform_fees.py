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
)


# Yearly billing is charged at 75% of twelve monthly fees.
YEARLY_BILLING_RATIO = Decimal("0.75")
MAX_ORDERS_PER_MONTH = 1_000_000_000


class BillingCycle(str, Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True, slots=True)
class FeeTier:
    """Static pricing configuration of one platform plan."""

    code: str
    name: str
    monthly_base_fee: Decimal
    card_rate_percent: Decimal
    card_rate_fixed: Decimal
    transaction_fee_percent_when_external: Decimal


DEFAULT_FEE_TIERS: tuple[FeeTier, ...] = (
    FeeTier(
        code="basic",
        name="Basic",
        monthly_base_fee=Decimal("29"),
        card_rate_percent=Decimal("2.9"),
        card_rate_fixed=Decimal("0.30"),
        transaction_fee_percent_when_external=Decimal("2.0"),
    ),
    FeeTier(
        code="shopify",
        name="Shopify",
        monthly_base_fee=Decimal("79"),
        card_rate_percent=Decimal("2.6"),
        card_rate_fixed=Decimal("0.30"),
        transaction_fee_percent_when_external=Decimal("1.0"),
    ),
    FeeTier(
        code="advanced",
        name="Advanced",
        monthly_base_fee=Decimal("299"),
        card_rate_percent=Decimal("2.4"),
        card_rate_fixed=Decimal("0.30"),
        transaction_fee_percent_when_external=Decimal("0.5"),
    ),
)


@dataclass(frozen=True, slots=True)
class FeeTierInput:
    orders_per_month: int
    avg_order_value: Decimal
    billing_cycle: BillingCycle = BillingCycle.MONTHLY
    uses_integrated_payments: bool = True
    # Only used when uses_integrated_payments is False
    external_gateway_percent: Decimal = Decimal("0")
    external_gateway_fixed: Decimal = Decimal("0")

    def validate(self) -> None:
        require_non_negative_int(
            "orders_per_month", self.orders_per_month, maximum=MAX_ORDERS_PER_MONTH
        )
        require_non_negative("avg_order_value", self.avg_order_value, maximum=MAX_AMOUNT)
        if not isinstance(self.billing_cycle, BillingCycle):
            raise InvalidInputError.for_field("billing_cycle", "billing_cycle is not supported")
        if not isinstance(self.uses_integrated_payments, bool):
            raise InvalidInputError.for_field(
                "uses_integrated_payments", "uses_integrated_payments must be true or false"
            )
        require_non_negative(
            "external_gateway_percent", self.external_gateway_percent, maximum=MAX_RATE_PERCENT
        )
        require_non_negative(
            "external_gateway_fixed", self.external_gateway_fixed, maximum=MAX_AMOUNT
        )


@dataclass(frozen=True, slots=True)
class FeeResult:
    tier_code: str
    plan_fee: Decimal
    integrated_payment_fee: Decimal
    external_payment_fee: Decimal
    platform_transaction_fee: Decimal
    total_cost: Decimal
