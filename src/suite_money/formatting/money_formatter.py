from __future__ import annotations

from typing import TYPE_CHECKING

from suite_money.domain.monetary.locale import Locale
from suite_money.domain.monetary.rounding import RoundingMode, round_to_exponent

if TYPE_CHECKING:
    from suite_money.domain.monetary.money import Money

# Money is not rounded on construction, only for display; this is the rounding used then
DEFAULT_DISPLAY_ROUNDING = RoundingMode.HALF_UP


def format_money(
    money: Money,
    locale: Locale | str | None = None,
    rounding: RoundingMode | None = None,
    include_symbol: bool = True,
) -> str:
    """Render $money as a display string.

    The amount is rounded to `currency.exponent` digits with $rounding, the integer part is
    grouped per $locale, and the currency symbol is placed before or after the number per
    `currency.symbol_first`. A negative sign always leads the whole string:

        -$2,000.01      USD in en-US
        -€2.000,01      EUR in en-EU
        ₹1,00,000.00    INR in en-IN
        1,234.50د.إ     AED in en-US

    Args:
        money (Money): Value to render.
        locale (Locale | str | None): Locale or locale id; defaults to the currency's default locale.
        rounding (RoundingMode | None): Display rounding; None means `DEFAULT_DISPLAY_ROUNDING` (half-up).
        include_symbol (bool): When False, render only the signed number.

    Returns:
        str: Formatted money string.
    """
    currency = money.currency
    resolved_locale = currency.default_locale if locale is None else Locale.resolve(locale)

    rounded = round_to_exponent(money.amount, currency.exponent, DEFAULT_DISPLAY_ROUNDING if rounding is None else rounding)
    # A value that rounds to zero prints without a sign
    sign = "-" if rounded < 0 else ""

    digits = f"{rounded.copy_abs():f}"
    integer_part, _, fraction_part = digits.partition(".")

    number = resolved_locale.group_digits(integer_part)
    if currency.exponent > 0:
        number += resolved_locale.decimal_separator + fraction_part.ljust(currency.exponent, "0")

    if not include_symbol:
        return f"{sign}{number}"
    if currency.symbol_first:
        return f"{sign}{currency.symbol}{number}"
    return f"{sign}{number}{currency.symbol}"
