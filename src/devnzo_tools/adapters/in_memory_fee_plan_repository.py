from __future__ import annotations

from typing import Iterable

from devnzo_tools.domain.platform_fees import DEFAULT_FEE_TIERS, FeeTier
from devnzo_tools.ports.fee_plan_repository import FeePlanRepository


class InMemoryFeePlanRepository(FeePlanRepository):
    """
    Canonical contract implementation, also the default tier source.

    - Keeps tiers in insertion order
    - Code lookup is case-insensitive
    """

    def __init__(self, tiers: Iterable[FeeTier] = DEFAULT_FEE_TIERS) -> None:
        self._tiers = list(tiers)

    def list_plans(self) -> list[FeeTier]:
        return list(self._tiers)

    def get_by_code(self, code: str) -> FeeTier | None:
        wanted = code.lower()
        for tier in self._tiers:
            if tier.code.lower() == wanted:
                return tier
        return None
