from __future__ import annotations

from decimal import Decimal

from suite_money.domain.monetary.currency_registry import EUR, USD
from suite_money.domain.monetary.money import Money
from suite_money.exchange.exchange import Exchange
from suite_money.exchange.exchange_rate import ExchangeRate


def usd(amount: str) -> Money:
    """Create USD Money from a decimal string, e.g. usd("2000.009")."""
    return Money(Decimal(amount), USD)


def eur(amount: str) -> Money:
    return Money(Decimal(amount), EUR)


def create_exchange_usd_eur() -> Exchange:
    """Create an Exchange holding USD->EUR at 1.1 and EUR->USD at 0.9."""
    exchange = Exchange()
    exchange.add_or_update_rate(ExchangeRate(USD, EUR, "1.1"))
    exchange.add_or_update_rate(ExchangeRate(EUR, USD, "0.9"))
    return exchange
