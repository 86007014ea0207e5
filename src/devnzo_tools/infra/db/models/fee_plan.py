from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Integer, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column

from devnzo_tools.infra.db.models.base import Base


class FeePlanRow(Base):
    __tablename__ = "fee_plans"

    code: Mapped[str] = mapped_column(String(30), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    monthly_base_fee: Mapped[Decimal] = mapped_column(
        Numeric(precision=10, scale=2), nullable=False
    )
    card_rate_percent: Mapped[Decimal] = mapped_column(
        Numeric(precision=6, scale=3), nullable=False
    )
    card_rate_fixed: Mapped[Decimal] = mapped_column(
        Numeric(precision=10, scale=2), nullable=False
    )
    transaction_fee_percent: Mapped[Decimal] = mapped_column(
        Numeric(precision=6, scale=3), nullable=False
    )  # charged only when an external payment gateway is used

    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
