from __future__ import annotations

from abc import ABC, abstractmethod

from devnzo_tools.domain.platform_fees import FeeTier


class FeePlanRepository(ABC):
    """
    Port for pricing tier configuration.

    Implementations return tiers in display order (cheapest plan first).
    """

    @abstractmethod
    def list_plans(self) -> list[FeeTier]:
        """Return every configured pricing tier in display order."""
        ...

    @abstractmethod
    def get_by_code(self, code: str) -> FeeTier | None:
        """
        Get a single tier by its code.

        Args:
            code: Tier code (e.g., "basic")

        Returns:
            FeeTier if found, None otherwise
        """
        ...
