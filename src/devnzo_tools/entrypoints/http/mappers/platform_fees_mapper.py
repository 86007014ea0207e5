from __future__ import annotations

from devnzo_tools.domain.money import to_cents
from devnzo_tools.domain.platform_fees import YEARLY_BILLING_RATIO, FeeTier, FeeTierInput
from devnzo_tools.entrypoints.http.dtos.platform_fees import (
    FeePlanDTO,
    FeePlanListResponseDTO,
    PlanFeeDTO,
    PlatformFeesRequestDTO,
    PlatformFeesResponseDTO,
)
from devnzo_tools.entrypoints.http.mappers.decimal_fields import DecimalFieldParser, money
from devnzo_tools.use_cases.compare_fee_plans import FeePlanComparison


class PlatformFeesMapper:
    """Maps between REST DTOs and domain models for the platform fee calculator."""

    @staticmethod
    def to_domain_request(dto: PlatformFeesRequestDTO) -> FeeTierInput:
        parser = DecimalFieldParser()
        avg_order_value = parser.parse("avg_order_value", dto.avg_order_value)
        external_gateway_percent = parser.parse(
            "external_gateway_percent", dto.external_gateway_percent
        )
        external_gateway_fixed = parser.parse("external_gateway_fixed", dto.external_gateway_fixed)
        parser.raise_if_errors()

        return FeeTierInput(
            orders_per_month=dto.orders_per_month,
            avg_order_value=avg_order_value,
            billing_cycle=dto.billing_cycle,
            uses_integrated_payments=dto.uses_integrated_payments,
            external_gateway_percent=external_gateway_percent,
            external_gateway_fixed=external_gateway_fixed,
        )

    @staticmethod
    def to_response(comparison: FeePlanComparison) -> PlatformFeesResponseDTO:
        tiers = {tier.code: tier for tier in comparison.tiers}
        results = []
        for result in comparison.results:
            tier = tiers[result.tier_code]
            results.append(
                PlanFeeDTO(
                    tier_code=tier.code,
                    tier_name=tier.name,
                    card_rate=f"{tier.card_rate_percent}% + {to_cents(tier.card_rate_fixed)}",
                    plan_fee=money(result.plan_fee),
                    integrated_payment_fee=money(result.integrated_payment_fee),
                    external_payment_fee=money(result.external_payment_fee),
                    platform_transaction_fee=money(result.platform_transaction_fee),
                    total_cost=money(result.total_cost),
                )
            )
        return PlatformFeesResponseDTO(results=results)

    @staticmethod
    def to_plan(tier: FeeTier) -> FeePlanDTO:
        return FeePlanDTO(
            code=tier.code,
            name=tier.name,
            monthly_base_fee=money(tier.monthly_base_fee),
            yearly_base_fee=money(tier.monthly_base_fee * 12 * YEARLY_BILLING_RATIO),
            card_rate_percent=str(tier.card_rate_percent),
            card_rate_fixed=money(tier.card_rate_fixed),
            transaction_fee_percent_when_external=str(tier.transaction_fee_percent_when_external),
        )

    @staticmethod
    def to_plan_list(tiers: list[FeeTier]) -> FeePlanListResponseDTO:
        return FeePlanListResponseDTO(plans=[PlatformFeesMapper.to_plan(tier) for tier in tiers])
