"""Reduce a rating set to a single score."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, getcontext
from typing import Any, Optional, Sequence

_TWO_PLACES = Decimal("0.01")


def _as_decimal(value: Any) -> Decimal:
    """Return *value* as a Decimal, or zero for anything that is not a finite number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return Decimal(0)
    if isinstance(value, int):
        return Decimal(value)
    if not math.isfinite(value):
        return Decimal(0)
    # str() keeps 0.1 as 0.1 instead of its binary expansion
    return Decimal(str(value))


def mean(values: Optional[Sequence[Any]]) -> float:
    """Return the mean of *values* rounded to two decimals.

    Unanswered (``None``) or non-numeric entries count as 0 but still count
    towards the divisor, so a partially answered set scores lower than the
    answers alone would suggest.  An empty sequence yields 0.
    """
    if not values:
        return 0
    total = sum((_as_decimal(v) for v in values), Decimal(0))
    avg = total / Decimal(len(values))
    # Quantizing needs every integer digit plus two decimals within the
    # context precision; past that the value is far beyond float resolution.
    if avg.adjusted() + 3 <= getcontext().prec:
        avg = avg.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    return float(avg)
