"""PostgreSQL implementation of FeePlanRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from devnzo_tools.domain.platform_fees import FeeTier
from devnzo_tools.infra.db.models.fee_plan import FeePlanRow
from devnzo_tools.ports.fee_plan_repository import FeePlanRepository


class PostgresFeePlanRepository(FeePlanRepository):
    """
    PostgreSQL implementation of FeePlanRepository.

    - Orders tiers by sort_order, then code
    - Looks codes up case-insensitively (codes are stored lowercase)
    - Converts FeePlanRow (infrastructure) to FeeTier (domain)
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_plans(self) -> list[FeeTier]:
        query = select(FeePlanRow).order_by(FeePlanRow.sort_order, FeePlanRow.code)
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get_by_code(self, code: str) -> FeeTier | None:
        row = self._session.get(FeePlanRow, code.lower())
        if row is None:
            return None
        return self._to_domain(row)

    @staticmethod
    def _to_domain(row: FeePlanRow) -> FeeTier:
        return FeeTier(
            code=row.code,
            name=row.name,
            monthly_base_fee=row.monthly_base_fee,
            card_rate_percent=row.card_rate_percent,
            card_rate_fixed=row.card_rate_fixed,
            transaction_fee_percent_when_external=row.transaction_fee_percent,
        )
