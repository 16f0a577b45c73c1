"""Exceptions raised by suite_money.

Every error derives from `MoneyError`, and also from the builtin exception a caller would
naturally catch for that situation (`ValueError`, `LookupError`, `TypeError`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from suite_money.domain.monetary.currency import Currency


class MoneyError(Exception):
    """Base class for all suite_money errors."""


class UnknownCurrencyError(MoneyError, ValueError):
    """Raised when a currency code (alpha or numeric) is not in the catalog."""

    def __init__(self, code: str, available: list[str] | None = None):
        self.code = code
        self.available = available or []

        message = f"Currency with code '{code}' not found in registry"
        if self.available:
            message += f". Available currencies: {self.available}"

        super().__init__(message)


class UnknownLocaleError(MoneyError, ValueError):
    """Raised when a locale id is not in the locale table."""

    def __init__(self, locale_id: str, available: list[str] | None = None):
        self.locale_id = locale_id
        self.available = available or []

        message = f"Locale with id '{locale_id}' not found in registry"
        if self.available:
            message += f". Available locales: {self.available}"

        super().__init__(message)


class CurrencyMismatchError(MoneyError, ValueError):
    """Raised when an operation combines Money of two different currencies."""

    def __init__(self, left: Currency, right: Currency, operation: str):
        self.left = left
        self.right = right
        self.operation = operation
        super().__init__(f"Cannot call `{operation}` on different currencies: {left} and {right}")


class CurrencyComparisonError(CurrencyMismatchError, TypeError):
    """Raised when Money of two different currencies is ordered (`<`, `<=`, `>`, `>=`).

    Ordering across currencies has no meaning, so this is a programming error and is kept
    apart from the arithmetic mismatch it subclasses.
    """


class InvalidRateError(MoneyError, ValueError):
    """Raised when an ExchangeRate would be meaningless (same currencies or rate <= 0)."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid exchange rate: {reason}")


class RateNotFoundError(MoneyError, LookupError):
    """Raised when the Exchange holds no rate for the requested currency pair."""

    def __init__(self, from_code: str, to_code: str):
        self.from_code = from_code
        self.to_code = to_code
        super().__init__(f"No exchange rate registered for pair {from_code}->{to_code}")


class MoneyParseError(MoneyError, ValueError):
    """Raised when a money string cannot be parsed."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse money from $text '{text}': {reason}")
