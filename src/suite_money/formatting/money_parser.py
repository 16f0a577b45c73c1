from __future__ import annotations

from decimal import Decimal

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.locale import Locale
from suite_money.domain.monetary.money import Money
from suite_money.errors import MoneyParseError

_ASCII_DIGITS = frozenset("0123456789")
_SIGNS = ("-", "+")


def parse_money(text: str, currency: Currency | str, locale: Locale | str | None = None) -> Money:
    """Parse a display string back into Money.

    Accepts the format produced by `format_money`: an optional sign, an optional currency
    symbol at either end, grouped integer digits and an optional fraction. The symbol is
    optional, grouping separators are ignored, and the sign may lead the string, follow a
    leading symbol, or trail the number.

    The returned amount is exactly the digits written; no rounding to the currency exponent
    happens here.

    Args:
        text (str): String like '$2,000.00', '-€2.000,01' or '2000'.
        currency (Currency | str): Currency or its alpha code.
        locale (Locale | str | None): Separator conventions; defaults to the currency's default locale.

    Returns:
        Money: Parsed value.

    Raises:
        MoneyParseError: If $text is empty, holds no digits, has more than one decimal
            separator, or contains any other stray character.
        UnknownCurrencyError: If $currency is an unknown alpha code.
    """
    if not isinstance(text, str):
        raise TypeError(f"$text must be a string, but provided value is: {text!r}")

    resolved_currency = Currency.resolve(currency)
    resolved_locale = resolved_currency.default_locale if locale is None else Locale.resolve(locale)

    remaining = text.strip()
    if not remaining:
        raise MoneyParseError(text, "input is empty")

    sign = None
    symbol = resolved_currency.symbol

    # Leading side: sign, then symbol, then a sign placed after the symbol
    sign, remaining = _take_leading_sign(remaining, sign)
    symbol_at_start = remaining.startswith(symbol)
    if symbol_at_start:
        remaining = remaining[len(symbol) :].lstrip()
    sign, remaining = _take_leading_sign(remaining, sign)

    # Trailing side mirrors the leading side
    sign, remaining = _take_trailing_sign(remaining, sign)
    # The symbol appears at most once, so a leading symbol rules out a trailing one
    if not symbol_at_start and remaining.endswith(symbol):
        remaining = remaining[: -len(symbol)].rstrip()
    sign, remaining = _take_trailing_sign(remaining, sign)

    number = remaining.replace(resolved_locale.grouping_separator, "")
    segments = number.split(resolved_locale.decimal_separator)
    if len(segments) > 2:
        raise MoneyParseError(text, f"found {len(segments) - 1} decimal separators '{resolved_locale.decimal_separator}'")

    integer_part = segments[0]
    fraction_part = segments[1] if len(segments) == 2 else ""

    stray = sorted({ch for ch in integer_part + fraction_part if ch not in _ASCII_DIGITS})
    if stray:
        raise MoneyParseError(text, f"unexpected characters {stray}")
    if not integer_part and not fraction_part:
        raise MoneyParseError(text, "no digits found")

    amount = Decimal(f"{integer_part or '0'}.{fraction_part}") if fraction_part else Decimal(integer_part)
    if sign == "-":
        amount = amount.copy_negate()

    return Money(amount, resolved_currency)


def _take_leading_sign(value: str, sign: str | None) -> tuple[str | None, str]:
    if sign is None and value[:1] in _SIGNS:
        return value[0], value[1:].lstrip()
    return sign, value


def _take_trailing_sign(value: str, sign: str | None) -> tuple[str | None, str]:
    if sign is None and value[-1:] in _SIGNS:
        return value[-1], value[:-1].rstrip()
    return sign, value
