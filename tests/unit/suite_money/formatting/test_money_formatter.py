from __future__ import annotations

import pytest

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.currency_registry import AED, BHD, EUR, GBP, INR, USD
from suite_money.domain.monetary.locale import EN_EU, EN_US
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.rounding import RoundingMode
from suite_money.errors import UnknownLocaleError
from suite_money.formatting.money_formatter import format_money


def test_negative_usd_in_us_locale() -> None:
    assert format_money(Money("-2000.009", USD).round(), EN_US) == "-$2,000.01"


def test_negative_eur_in_eu_locale() -> None:
    assert format_money(Money("-2000.009", EUR).round(), EN_EU) == "-€2.000,01"


def test_minor_units_formatting() -> None:
    assert format_money(Money.from_minor_units(-200009, USD), EN_US) == "-$2,000.09"


@pytest.mark.parametrize(
    "money, expected",
    [
        (Money("0", USD), "$0.00"),
        (Money("5", USD), "$5.00"),
        (Money("1234567.8", USD), "$1,234,567.80"),
        (Money("999.999", USD), "$1,000.00"),
        (Money("1234.5", GBP), "£1,234.50"),
        (Money("1234.5", BHD), "ب.د1,234.500"),
        (Money("1234.5", AED), "1,234.50د.إ"),
        (Money("-1234.5", AED), "-1,234.50د.إ"),
        (Money("100000", INR), "₹1,00,000.00"),
        (Money("12345678.9", INR), "₹1,23,45,678.90"),
        (Money("1234.56", EUR), "€1.234,56"),
    ],
)
def test_default_locale_formatting(money: Money, expected: str) -> None:
    assert format_money(money) == expected


def test_rounds_half_up_for_display_by_default() -> None:
    assert format_money(Money("0.125", USD)) == "$0.13"
    assert format_money(Money("-0.125", USD)) == "-$0.13"


def test_display_rounding_is_overridable() -> None:
    assert format_money(Money("0.125", USD), rounding=RoundingMode.HALF_EVEN) == "$0.12"
    assert format_money(Money("0.129", USD), rounding=RoundingMode.FLOOR) == "$0.12"


def test_value_rounding_to_zero_has_no_sign() -> None:
    assert format_money(Money("-0.001", USD)) == "$0.00"


def test_locale_override_and_locale_id() -> None:
    money = Money("1234.5", USD)
    assert format_money(money, EN_EU) == "$1.234,50"
    assert format_money(money, "en-EU") == "$1.234,50"


def test_unknown_locale_id() -> None:
    with pytest.raises(UnknownLocaleError):
        format_money(Money("1", USD), "xx-XX")


def test_without_symbol() -> None:
    assert format_money(Money("-2000.5", USD), include_symbol=False) == "-2,000.50"


def test_zero_exponent_currency_omits_fraction() -> None:
    no_minor = Currency("XTS", "963", "Test Currency", "T", 0, symbol_first=False, default_locale=EN_US)
    assert format_money(Money("1234.5", no_minor)) == "1,235T"


def test_money_format_method() -> None:
    assert Money("1234.5", USD).format("en-EU", include_symbol=False) == "1.234,50"


def test_none_rounding_means_display_default() -> None:
    money = Money("1.005", USD)
    assert format_money(money, rounding=None) == "$1.01"
    assert money.format(rounding=None) == "$1.01"
    assert money.format(rounding=None) == format_money(money)
