"""
Unit test suite for PostgresFeePlanRepository.

Uses a mocked SQLAlchemy session. Tests verify:
- Listing runs a single SELECT and keeps row order
- Lookups go through the primary key with a lowercased code
- Type conversions (FeePlanRow → FeeTier, NUMERIC → Decimal) work
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest
from sqlalchemy.orm import Session

from devnzo_tools.adapters.postgres_fee_plan_repository import PostgresFeePlanRepository
from devnzo_tools.domain.platform_fees import FeeTier
from devnzo_tools.infra.db.models.fee_plan import FeePlanRow


@pytest.fixture()
def mock_session() -> Mock:
    """Mock SQLAlchemy session."""
    return Mock(spec=Session)


@pytest.fixture()
def sample_rows() -> list[FeePlanRow]:
    """Sample FeePlanRow instances as NUMERIC columns would return them."""
    return [
        FeePlanRow(
            code="basic",
            name="Basic",
            monthly_base_fee=Decimal("29.00"),
            card_rate_percent=Decimal("2.900"),
            card_rate_fixed=Decimal("0.30"),
            transaction_fee_percent=Decimal("2.000"),
            sort_order=1,
        ),
        FeePlanRow(
            code="shopify",
            name="Shopify",
            monthly_base_fee=Decimal("79.00"),
            card_rate_percent=Decimal("2.600"),
            card_rate_fixed=Decimal("0.30"),
            transaction_fee_percent=Decimal("1.000"),
            sort_order=2,
        ),
    ]


# ==============================================================================
# list_plans
# ==============================================================================


def test_list_plans_executes_single_select(
    mock_session: Mock, sample_rows: list[FeePlanRow]
) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = sample_rows

    plans = PostgresFeePlanRepository(mock_session).list_plans()

    assert mock_session.execute.call_count == 1
    assert [plan.code for plan in plans] == ["basic", "shopify"]


def test_list_plans_orders_by_sort_order(mock_session: Mock) -> None:
    """The SELECT orders by sort_order, then code."""
    mock_session.execute.return_value.scalars.return_value.all.return_value = []

    PostgresFeePlanRepository(mock_session).list_plans()

    query = mock_session.execute.call_args[0][0]
    compiled = str(query).lower()
    assert "order by fee_plans.sort_order, fee_plans.code" in compiled


def test_list_plans_returns_domain_entities(
    mock_session: Mock, sample_rows: list[FeePlanRow]
) -> None:
    """Repository returns FeeTier domain entities, not FeePlanRow models."""
    mock_session.execute.return_value.scalars.return_value.all.return_value = sample_rows

    plans = PostgresFeePlanRepository(mock_session).list_plans()

    for plan in plans:
        assert isinstance(plan, FeeTier)
        assert not isinstance(plan, FeePlanRow)


def test_list_plans_with_empty_table(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = []

    assert PostgresFeePlanRepository(mock_session).list_plans() == []


# ==============================================================================
# get_by_code
# ==============================================================================


def test_get_by_code_lowercases_primary_key(
    mock_session: Mock, sample_rows: list[FeePlanRow]
) -> None:
    mock_session.get.return_value = sample_rows[1]

    tier = PostgresFeePlanRepository(mock_session).get_by_code("Shopify")

    mock_session.get.assert_called_once_with(FeePlanRow, "shopify")
    assert tier is not None
    assert tier.name == "Shopify"


def test_get_by_code_returns_none_when_missing(mock_session: Mock) -> None:
    mock_session.get.return_value = None

    assert PostgresFeePlanRepository(mock_session).get_by_code("enterprise") is None


def test_get_by_code_maps_every_column(
    mock_session: Mock, sample_rows: list[FeePlanRow]
) -> None:
    mock_session.get.return_value = sample_rows[0]

    tier = PostgresFeePlanRepository(mock_session).get_by_code("basic")

    assert tier == FeeTier(
        code="basic",
        name="Basic",
        monthly_base_fee=Decimal("29.00"),
        card_rate_percent=Decimal("2.900"),
        card_rate_fixed=Decimal("0.30"),
        transaction_fee_percent_when_external=Decimal("2.000"),
    )
    assert isinstance(tier.monthly_base_fee, Decimal)
