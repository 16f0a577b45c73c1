from __future__ import annotations

from decimal import Decimal

import pytest

from suite_money import (
    Currency,
    CurrencyMismatchError,
    Exchange,
    ExchangeRate,
    InvalidRateError,
    Money,
    RoundingMode,
    format_money,
    parse_money,
)


def test_end_to_end_price_list_in_two_currencies() -> None:
    """
    Price a basket in USD, convert it to EUR via the Exchange, and render both totals
    the way a customer would see them.
    """
    usd = Currency.from_str("USD")
    eur = Currency.from_str("EUR")

    items = [parse_money("$1,299.99", usd), parse_money("$0.50", usd), Money.from_minor_units(1001, usd)]
    total = sum(items[1:], items[0])
    assert total == Money(Decimal("1310.50"), usd)

    discounted = (total * Decimal("0.85")).round(RoundingMode.HALF_EVEN)
    assert format_money(discounted) == "$1,113.92"

    exchange = Exchange()
    exchange.add_or_update_rate(ExchangeRate(usd, eur, Decimal("0.9")))
    in_eur = exchange.convert(discounted, eur)
    assert format_money(in_eur) == "€1.002,53"

    with pytest.raises(CurrencyMismatchError):
        total + in_eur


def test_catalog_scenarios() -> None:
    usd = Currency.from_str("USD")
    eur = Currency.from_str("EUR")

    assert Money.from_minor_units(20000, usd) == Money.from_major_units(200, usd)
    assert format_money(Money("-2000.009", usd).round(), "en-US") == "-$2,000.01"
    assert format_money(Money("-2000.009", eur).round(), "en-EU") == "-€2.000,01"
    assert parse_money("2,000.00", usd) == Money.from_major_units(2000, usd)

    rate = ExchangeRate(usd, eur, Decimal("1.1"))
    assert rate.convert(Money.from_major_units(1000, usd)) == Money.from_major_units(1100, eur)

    with pytest.raises(InvalidRateError):
        ExchangeRate(usd, usd, Decimal("1.0"))
