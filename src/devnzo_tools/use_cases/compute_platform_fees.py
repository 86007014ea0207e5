from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from devnzo_tools.domain.money import HUNDRED, ZERO, calculation_context
from devnzo_tools.domain.platform_fees import (
    YEARLY_BILLING_RATIO,
    BillingCycle,
    FeeResult,
    FeeTier,
    FeeTierInput,
)


@dataclass(frozen=True, slots=True)
class ComputePlatformFees:
    """
    Estimate the monthly cost of running a store on each pricing tier.

    Each tier is computed independently:
    - plan_fee: monthly base fee, or 75% of twelve months spread per month on yearly billing
    - integrated payments: revenue * card rate + orders * fixed card fee
    - external gateway: gateway percent and fixed fee, plus the tier's
      platform transaction fee on revenue
    """

    def execute(self, fees: FeeTierInput, tiers: Sequence[FeeTier]) -> list[FeeResult]:
        fees.validate()
        return [self._compute_tier(fees, tier) for tier in tiers]

    def _compute_tier(self, fees: FeeTierInput, tier: FeeTier) -> FeeResult:
        with calculation_context():
            orders = Decimal(fees.orders_per_month)
            revenue = orders * Decimal(fees.avg_order_value)

            if fees.billing_cycle is BillingCycle.YEARLY:
                plan_fee = tier.monthly_base_fee * 12 * YEARLY_BILLING_RATIO / 12
            else:
                plan_fee = tier.monthly_base_fee

            integrated_payment_fee = ZERO
            external_payment_fee = ZERO
            platform_transaction_fee = ZERO

            if fees.uses_integrated_payments:
                integrated_payment_fee = (
                    revenue * tier.card_rate_percent / HUNDRED + orders * tier.card_rate_fixed
                )
            else:
                external_payment_fee = (
                    revenue * Decimal(fees.external_gateway_percent) / HUNDRED
                    + orders * Decimal(fees.external_gateway_fixed)
                )
                platform_transaction_fee = (
                    revenue * tier.transaction_fee_percent_when_external / HUNDRED
                )

            total_cost = (
                plan_fee + integrated_payment_fee + external_payment_fee + platform_transaction_fee
            )

        return FeeResult(
            tier_code=tier.code,
            plan_fee=plan_fee,
            integrated_payment_fee=integrated_payment_fee,
            external_payment_fee=external_payment_fee,
            platform_transaction_fee=platform_transaction_fee,
            total_cost=total_cost,
        )
