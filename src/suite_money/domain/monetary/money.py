from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.rounding import RoundingMode, round_to_exponent
from suite_money.errors import CurrencyComparisonError, CurrencyMismatchError
from suite_money.formatting.money_formatter import format_money
from suite_money.utils.numeric_tools import (
    DecimalLike,
    as_decimal,
    exact_add,
    exact_multiply,
    exact_subtract,
    extended_divide,
    shift_decimal,
)

if TYPE_CHECKING:
    from suite_money.domain.monetary.locale import Locale


class Money:
    """Represents a monetary amount with currency.

    Uses Python's Decimal for exact arithmetic. The amount is never rounded implicitly:
    sums, differences and products keep every digit, and quotients keep extended precision
    (see `DIVISION_PRECISION`). Rounding to the currency exponent only happens through
    `round`, when formatting for display, or when converting via an `ExchangeRate`.

    Money is immutable; every operation returns a new instance.
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: DecimalLike, currency: Currency):
        """Initialize Money with amount and currency.

        Args:
            amount: Numeric amount (Decimal-like scalar). Kept as given, without rounding.
            currency (Currency): Currency object.

        Raises:
            ValueError: If amount is invalid or not finite.
            TypeError: If currency is not Currency instance.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        # Raise: $amount must be convertible to a finite Decimal
        try:
            decimal_amount = as_decimal(amount)
        except (ValueError, TypeError) as e:
            raise ValueError(f"Cannot init `Money` because $amount ({amount!r}) cannot be converted to Decimal") from e

        self._amount = decimal_amount
        self._currency = currency

    # region Construction

    @classmethod
    def from_minor_units(cls, amount: int, currency: Currency) -> Money:
        """Create Money from an integer count of minor units (e.g., cents).

        `Money.from_minor_units(200009, USD)` is 2000.09 USD.
        """
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"$amount must be an int of minor units, but provided value is: {amount!r}")
        return cls(shift_decimal(Decimal(amount), -currency.exponent), currency)

    @classmethod
    def from_major_units(cls, amount: int, currency: Currency) -> Money:
        """Create Money from an integer count of whole units."""
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"$amount must be an int of major units, but provided value is: {amount!r}")
        return cls(Decimal(amount), currency)

    @classmethod
    def from_str(cls, text: str, currency: Currency | str, locale: Locale | str | None = None) -> Money:
        """Parse Money from a display string like '$2,000.00' or '-€2.000,01'.

        See `parse_money` for the accepted format.
        """
        from suite_money.formatting.money_parser import parse_money

        return parse_money(text, currency, locale)

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        return cls(Decimal(0), currency)

    # endregion

    # region Properties

    @property
    def amount(self) -> Decimal:
        """Get the exact decimal amount."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    def is_zero(self) -> bool:
        return self._amount == 0

    def is_positive(self) -> bool:
        return self._amount > 0

    def is_negative(self) -> bool:
        return self._amount < 0

    # endregion

    # region Rounding

    def round(self, mode: RoundingMode = RoundingMode.HALF_EVEN) -> Money:
        """Return a new Money rounded to the currency exponent.

        Args:
            mode (RoundingMode): Rounding mode; banker's rounding by default.

        Returns:
            Money: New instance with exactly `currency.exponent` fractional digits.
        """
        return self.__class__(round_to_exponent(self._amount, self._currency.exponent, mode), self._currency)

    # Alias, e.g. `price.rounded(RoundingMode.FLOOR)`
    rounded = round

    def to_minor_units(self, mode: RoundingMode = RoundingMode.HALF_EVEN) -> int:
        """Return the amount as an integer count of minor units, rounding with $mode first."""
        rounded_amount = round_to_exponent(self._amount, self._currency.exponent, mode)
        return int(shift_decimal(rounded_amount, self._currency.exponent))

    # endregion

    # region Formatting

    def format(self, locale: Locale | str | None = None, rounding: RoundingMode | None = None, include_symbol: bool = True) -> str:
        """Return display string for this Money. See `format_money`."""
        return format_money(self, locale, rounding=rounding, include_symbol=include_symbol)

    def __str__(self) -> str:
        """Return display string in the currency's default locale, e.g. '-$2,000.01'."""
        return format_money(self)

    def __repr__(self) -> str:
        """Return string like "Money('2000.009', USD)"."""
        return f"{self.__class__.__name__}('{self._amount}', {self._currency.code})"

    # endregion

    def _check_same_currency(self, other: Money, operation: str) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        if self._currency != other._currency:
            raise CurrencyMismatchError(self._currency, other._currency, operation)

    def _check_comparable(self, other: Money, operation: str) -> None:
        if self._currency != other._currency:
            raise CurrencyComparisonError(self._currency, other._currency, operation)

    # region Comparison operators (same currency required)

    def __eq__(self, other) -> bool:
        """Check equality with another Money object.

        Money of different currencies is never equal; no error is raised so Money
        can be used in sets and as dict keys.
        """
        if not isinstance(other, Money):
            return NotImplemented
        if self._currency != other._currency:
            return False
        return self._amount == other._amount

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self._amount, self._currency.code))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_comparable(other, "<")
        return self._amount < other._amount

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_comparable(other, "<=")
        return self._amount <= other._amount

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_comparable(other, ">")
        return self._amount > other._amount

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_comparable(other, ">=")
        return self._amount >= other._amount

    # endregion

    # region Arithmetic operations

    def __add__(self, other):
        """Add two Money objects of the same currency. The sum is exact."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "add")
        return self.__class__(exact_add(self._amount, other._amount), self._currency)

    def __sub__(self, other):
        """Subtract two Money objects of the same currency. The difference is exact."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "subtract")
        return self.__class__(exact_subtract(self._amount, other._amount), self._currency)

    def __mul__(self, other):
        """Multiply Money by a plain number (returns Money). The product is exact."""
        if isinstance(other, Money):
            return NotImplemented  # Money * Money doesn't make sense
        try:
            factor = as_decimal(other)
        except (ValueError, TypeError):
            return NotImplemented
        return self.__class__(exact_multiply(self._amount, factor), self._currency)

    def __rmul__(self, other):
        """Right multiplication: number * Money."""
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide Money by number (returns Money) or Money by Money (returns Decimal).

        Non-terminating quotients keep extended precision instead of being rounded to the
        currency exponent, so `Money(3, USD) / 3` is 1 USD and `Money(1, USD) / 3` is
        0.3333... USD.
        """
        if isinstance(other, Money):
            self._check_same_currency(other, "divide")
            if other._amount == 0:
                raise ZeroDivisionError("Cannot divide by zero Money")
            return extended_divide(self._amount, other._amount)

        try:
            divisor = as_decimal(other)
        except (ValueError, TypeError):
            return NotImplemented
        if divisor == 0:
            raise ZeroDivisionError("Cannot divide Money by zero")
        return self.__class__(extended_divide(self._amount, divisor), self._currency)

    def __neg__(self):
        return self.__class__(self._amount.copy_negate(), self._currency)

    def __pos__(self):
        return self.__class__(self._amount, self._currency)

    def __abs__(self):
        return self.__class__(self._amount.copy_abs(), self._currency)

    # endregion
