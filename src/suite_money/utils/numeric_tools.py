from __future__ import annotations

from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_EVEN, localcontext
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Minimum number of significant digits kept by division (non-terminating quotients stop here)
DIVISION_PRECISION = 34

# Floor for the precision of every exact-arithmetic context
_MIN_PRECISION = 28


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise. Booleans are
    rejected even though `bool` is an `int` subclass.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        TypeError: If $value is not one of the supported scalar types.
        ValueError: If $value cannot be parsed or is not a finite number.
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, str, float)):
        raise TypeError(f"$value must be Decimal, int, str or float, but provided value is: {value!r}")

    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"$value ({value!r}) cannot be converted to Decimal") from e

    if not result.is_finite():
        raise ValueError(f"$value must be a finite number, but provided value is: {value!r}")

    return result


def _digit_span(value: Decimal) -> tuple[int, int, int]:
    """Return (digit count, most-significant exponent, least-significant exponent)."""
    digits = len(value.as_tuple().digits)
    exponent = value.as_tuple().exponent
    return digits, exponent + digits - 1, exponent


def exact_context(*values: Decimal) -> Context:
    """Build a decimal `Context` wide enough to add, subtract or multiply $values without rounding.

    The precision covers the full digit span of all operands plus the digits a product can
    grow by, so the result of `+`, `-` and `*` on these values is exact.
    """
    spans = [_digit_span(v) for v in values]
    total_digits = sum(span[0] for span in spans)
    highest = max(span[1] for span in spans)
    lowest = min(span[2] for span in spans)
    precision = max(_MIN_PRECISION, total_digits + (highest - lowest) + 2)
    return Context(prec=precision, rounding=ROUND_HALF_EVEN)


def division_context(dividend: Decimal, divisor: Decimal) -> Context:
    """Build a decimal `Context` for division.

    Keeps at least `DIVISION_PRECISION` significant digits and never fewer than the
    operands themselves carry, so a repeating quotient is cut far below any currency exponent.
    """
    digits = len(dividend.as_tuple().digits) + len(divisor.as_tuple().digits)
    return Context(prec=max(DIVISION_PRECISION, digits + 2), rounding=ROUND_HALF_EVEN)


def exact_add(left: Decimal, right: Decimal) -> Decimal:
    with localcontext(exact_context(left, right)):
        return left + right


def exact_subtract(left: Decimal, right: Decimal) -> Decimal:
    with localcontext(exact_context(left, right)):
        return left - right


def exact_multiply(left: Decimal, right: Decimal) -> Decimal:
    with localcontext(exact_context(left, right)):
        return left * right


def extended_divide(dividend: Decimal, divisor: Decimal) -> Decimal:
    """Divide keeping extended precision; raises ZeroDivisionError on a zero $divisor."""
    if divisor == 0:
        raise ZeroDivisionError(f"Cannot divide {dividend} by zero")
    with localcontext(division_context(dividend, divisor)):
        return dividend / divisor


def shift_decimal(value: Decimal, places: int) -> Decimal:
    """Multiply $value by 10**$places by moving its exponent; never rounds."""
    sign, digits, exponent = value.as_tuple()
    return Decimal((sign, digits, exponent + places))
