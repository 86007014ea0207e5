#!/usr/bin/env python3
"""
Reset the fee_plans table to the built-in pricing tiers.

Idempotent: existing rows are deleted before the defaults are inserted.

Usage:
    DATABASE_URL=postgresql+psycopg://... uv run python scripts/seed_fee_plans.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from devnzo_tools.domain.platform_fees import DEFAULT_FEE_TIERS, FeeTier
from devnzo_tools.infra.db.models.fee_plan import FeePlanRow
from devnzo_tools.infra.db.session import get_session


def to_row(tier: FeeTier, sort_order: int) -> FeePlanRow:
    return FeePlanRow(
        code=tier.code,
        name=tier.name,
        monthly_base_fee=tier.monthly_base_fee,
        card_rate_percent=tier.card_rate_percent,
        card_rate_fixed=tier.card_rate_fixed,
        transaction_fee_percent=tier.transaction_fee_percent_when_external,
        sort_order=sort_order,
    )


def seed_fee_plans() -> None:
    print(f"Seeding {len(DEFAULT_FEE_TIERS)} fee plans...")

    with get_session() as session:
        deleted_count = session.query(FeePlanRow).delete()
        print(f"   Deleted {deleted_count} existing plans")

        rows = [to_row(tier, index) for index, tier in enumerate(DEFAULT_FEE_TIERS)]
        session.add_all(rows)
        session.flush()

        for row in rows:
            print(
                f"   {row.code}: {row.monthly_base_fee}/mo, "
                f"{row.card_rate_percent}% + {row.card_rate_fixed}, "
                f"{row.transaction_fee_percent}% external"
            )


if __name__ == "__main__":
    try:
        seed_fee_plans()
    except Exception as e:
        print(f"Error seeding fee plans: {e}", file=sys.stderr)
        sys.exit(1)
