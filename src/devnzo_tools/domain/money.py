"""Decimal arithmetic policy for every calculator.

- All intermediate values keep full precision (CALCULATION_PRECISION digits)
- Rounding to cents happens only when a figure is presented (``to_cents``)
- Calculations run in a local decimal context so callers' context settings
  never change results
"""

from __future__ import annotations

from contextlib import contextmanager
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal, localcontext
from typing import Iterator


CALCULATION_PRECISION = 28
CENTS = Decimal("0.01")
ONE = Decimal("1")
ZERO = Decimal("0")
HUNDRED = Decimal("100")


@contextmanager
def calculation_context() -> Iterator[None]:
    with localcontext() as ctx:
        ctx.prec = CALCULATION_PRECISION
        ctx.rounding = ROUND_HALF_EVEN
        yield


def to_cents(value: Decimal) -> Decimal:
    with localcontext() as ctx:
        # Room for every integer digit plus the two decimals
        ctx.prec = max(CALCULATION_PRECISION, value.adjusted() + 3)
        rounded = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    # Residue below a cent must not render as "-0.00"
    return abs(rounded) if rounded == 0 else rounded
