"""Create fee_plans table with default tiers

Revision ID: 3c1f0b7a9d42
Revises:
Create Date: 2026-10-16 10:12:04.118230

"""

from decimal import Decimal
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3c1f0b7a9d42"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    fee_plans = op.create_table(
        "fee_plans",
        sa.Column("code", sa.String(length=30), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("monthly_base_fee", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("card_rate_percent", sa.Numeric(precision=6, scale=3), nullable=False),
        sa.Column("card_rate_fixed", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("transaction_fee_percent", sa.Numeric(precision=6, scale=3), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )

    # Snapshot of the tiers at creation time; later changes go in new revisions
    op.bulk_insert(
        fee_plans,
        [
            {
                "code": "basic",
                "name": "Basic",
                "monthly_base_fee": Decimal("29.00"),
                "card_rate_percent": Decimal("2.9"),
                "card_rate_fixed": Decimal("0.30"),
                "transaction_fee_percent": Decimal("2.0"),
                "sort_order": 0,
            },
            {
                "code": "shopify",
                "name": "Shopify",
                "monthly_base_fee": Decimal("79.00"),
                "card_rate_percent": Decimal("2.6"),
                "card_rate_fixed": Decimal("0.30"),
                "transaction_fee_percent": Decimal("1.0"),
                "sort_order": 1,
            },
            {
                "code": "advanced",
                "name": "Advanced",
                "monthly_base_fee": Decimal("299.00"),
                "card_rate_percent": Decimal("2.4"),
                "card_rate_fixed": Decimal("0.30"),
                "transaction_fee_percent": Decimal("0.5"),
                "sort_order": 2,
            },
        ],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("fee_plans")
