__version__ = "0.1.0"

from suite_money.errors import (
    CurrencyComparisonError,
    CurrencyMismatchError,
    InvalidRateError,
    MoneyError,
    MoneyParseError,
    RateNotFoundError,
    UnknownCurrencyError,
    UnknownLocaleError,
)
from suite_money.domain.monetary.locale import Locale
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary import currency_registry  # noqa: F401  (fills the currency catalog)
from suite_money.domain.monetary.rounding import RoundingMode
from suite_money.domain.monetary.money import Money
from suite_money.formatting.money_formatter import format_money
from suite_money.formatting.money_parser import parse_money
from suite_money.exchange.exchange_rate import ExchangeRate
from suite_money.exchange.exchange import Exchange

__all__ = [
    "Currency",
    "CurrencyComparisonError",
    "CurrencyMismatchError",
    "Exchange",
    "ExchangeRate",
    "InvalidRateError",
    "Locale",
    "Money",
    "MoneyError",
    "MoneyParseError",
    "RateNotFoundError",
    "RoundingMode",
    "UnknownCurrencyError",
    "UnknownLocaleError",
    "format_money",
    "parse_money",
]
