from __future__ import annotations

from decimal import Context, Decimal, ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP
from enum import Enum


class RoundingMode(Enum):
    """Rounding modes supported when scaling an amount to a currency exponent.

    Each member's value is the matching `decimal` module rounding constant.
    """

    HALF_UP = ROUND_HALF_UP
    HALF_DOWN = ROUND_HALF_DOWN
    HALF_EVEN = ROUND_HALF_EVEN
    CEILING = ROUND_CEILING
    FLOOR = ROUND_FLOOR


def quantum(exponent: int) -> Decimal:
    """Return the smallest step for $exponent fractional digits, e.g. Decimal('1E-2') for 2."""
    return Decimal(1).scaleb(-exponent)


def round_to_exponent(value: Decimal, exponent: int, mode: RoundingMode) -> Decimal:
    """Round $value to exactly $exponent fractional digits using $mode.

    The integer part is never cut, no matter how many digits it has.
    """
    if not isinstance(mode, RoundingMode):
        raise TypeError(f"$mode must be a RoundingMode instance, but provided value is: {mode}")

    # Quantize needs room for every integer digit plus the requested fraction
    precision = max(28, value.adjusted() + exponent + 2)
    return value.quantize(quantum(exponent), rounding=mode.value, context=Context(prec=precision))
