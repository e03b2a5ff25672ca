"""
Financial utility functions.

All monetary values use :class:`decimal.Decimal` so that sums over a
month of UPI activity never pick up IEEE-754 floating-point drift.
"""

from __future__ import annotations

import math
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, ROUND_HALF_UP, Context, Decimal, getcontext
from fractions import Fraction
from typing import Any, Sequence


# ── Constants ────────────────────────────────────────────────────────────────

ZERO = Decimal("0")
HALF = Fraction(1, 2)

CREDIT = "credit"
DEBIT = "debit"
TRANSACTION_TYPES = (CREDIT, DEBIT)

LARGE_TRANSACTION_THRESHOLD = Decimal("5000")
SMALL_TRANSACTION_FLOOR = Decimal("100")


# ── Amount checks ────────────────────────────────────────────────────────────

def is_number(value: Any) -> bool:
    """
    True for real numeric values (``int``, ``float``, ``Decimal``).

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, Decimal))


def is_finite(value: int | float | Decimal) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, int):
        return True
    return math.isfinite(value)


# ── Exact arithmetic ─────────────────────────────────────────────────────────

def exact_context(values: Sequence[Decimal]) -> Context:
    """
    Decimal context in which summing *values* never rounds.

    The default 28-digit context silently drops low digits once a log
    mixes very large and very small amounts.
    """
    high = max(v.adjusted() for v in values)
    low = min(v.as_tuple().exponent for v in values)
    digits = high - low + len(str(len(values))) + 2
    return Context(
        prec=min(max(digits, getcontext().prec), MAX_PREC),
        rounding=ROUND_HALF_UP,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
    )


def rounded_mean(total: Decimal, count: int) -> int:
    """
    Return ``total / count`` rounded to the nearest integer, .5 rounding up.

    Computed on fractions so the result is exact at any magnitude.
    *total* must be non-negative and *count* positive.

    Examples
    --------
    >>> rounded_mean(Decimal("5300"), 3)
    1767
    >>> rounded_mean(Decimal("5"), 2)
    3
    """
    return math.floor(Fraction(total) / count + HALF)


# ── Serialisation helpers ────────────────────────────────────────────────────

def decimal_to_number(value: Decimal) -> int | float:
    """Convert Decimal → int when integral, float otherwise, for JSON."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def to_decimal(value: int | float | str | Decimal) -> Decimal:
    """
    Safely convert a raw value to :class:`~decimal.Decimal`.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion.

    Raises
    ------
    ValueError
        If *value* cannot be interpreted as a decimal number.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    try:
        return Decimal(str(value))
    except Exception as exc:
        raise ValueError(f"Cannot convert {value!r} to Decimal: {exc}") from exc
