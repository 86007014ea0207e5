from __future__ import annotations

from dataclasses import dataclass

from devnzo_tools.domain.errors import NotFoundError
from devnzo_tools.domain.platform_fees import FeeResult, FeeTier, FeeTierInput
from devnzo_tools.ports.fee_plan_repository import FeePlanRepository
from devnzo_tools.use_cases.compute_platform_fees import ComputePlatformFees


@dataclass(frozen=True, slots=True)
class FeePlanComparison:
    tiers: list[FeeTier]
    results: list[FeeResult]


class CompareFeePlans:
    """
    Run the platform fee calculator against every configured pricing tier.

    Tiers come from the repository; the arithmetic lives in ComputePlatformFees.
    """

    def __init__(
        self,
        fee_plan_repository: FeePlanRepository,
        calculator: ComputePlatformFees | None = None,
    ) -> None:
        self._repository = fee_plan_repository
        self._calculator = calculator or ComputePlatformFees()

    def execute(self, fees: FeeTierInput) -> FeePlanComparison:
        tiers = self._repository.list_plans()
        results = self._calculator.execute(fees, tiers)
        return FeePlanComparison(tiers=tiers, results=results)


class ListFeePlans:
    def __init__(self, fee_plan_repository: FeePlanRepository) -> None:
        self._repository = fee_plan_repository

    def execute(self) -> list[FeeTier]:
        return self._repository.list_plans()


class GetFeePlan:
    """
    Retrieve a single pricing tier by code.

    Raises:
        NotFoundError: If no tier has the given code
    """

    def __init__(self, fee_plan_repository: FeePlanRepository) -> None:
        self._repository = fee_plan_repository

    def execute(self, code: str) -> FeeTier:
        tier = self._repository.get_by_code(code)
        if tier is None:
            raise NotFoundError(resource="FeePlan", identifier=code)
        return tier
