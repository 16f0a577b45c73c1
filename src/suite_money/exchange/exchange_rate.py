from __future__ import annotations

from decimal import Decimal

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.rounding import RoundingMode, round_to_exponent
from suite_money.errors import CurrencyMismatchError, InvalidRateError
from suite_money.utils.numeric_tools import DecimalLike, as_decimal, exact_multiply

# Cash conversion rounds half-up to the target currency exponent
CONVERSION_ROUNDING = RoundingMode.HALF_UP


class ExchangeRate:
    """Rate for converting Money from one currency into another.

    One unit of $from_currency buys $rate units of $to_currency. A rate only works in its own
    direction; the reverse direction is a separate ExchangeRate.

    Attributes:
        from_currency (Currency): Currency of Money accepted by `convert`.
        to_currency (Currency): Currency of Money returned by `convert`.
        rate (Decimal): Positive conversion factor.
    """

    __slots__ = ("_from_currency", "_to_currency", "_rate")

    def __init__(self, from_currency: Currency, to_currency: Currency, rate: DecimalLike):
        """Initialize an ExchangeRate.

        Raises:
            InvalidRateError: If both currencies are the same, or $rate is not a positive number.
            TypeError: If a currency is not Currency instance.
        """
        for name, currency in (("from_currency", from_currency), ("to_currency", to_currency)):
            if not isinstance(currency, Currency):
                raise TypeError(f"${name} must be a Currency instance, but provided value is: {currency}")

        if from_currency == to_currency:
            raise InvalidRateError(f"$from_currency and $to_currency must differ, but both are {from_currency}")

        try:
            decimal_rate = as_decimal(rate)
        except (ValueError, TypeError) as e:
            raise InvalidRateError(f"$rate ({rate!r}) cannot be converted to Decimal") from e

        if decimal_rate <= 0:
            raise InvalidRateError(f"$rate must be positive, but provided value is: {decimal_rate}")

        self._from_currency = from_currency
        self._to_currency = to_currency
        self._rate = decimal_rate

    @property
    def from_currency(self) -> Currency:
        return self._from_currency

    @property
    def to_currency(self) -> Currency:
        return self._to_currency

    @property
    def rate(self) -> Decimal:
        return self._rate

    @property
    def pair(self) -> tuple[str, str]:
        """Ordered (from, to) currency codes used to key this rate."""
        return self._from_currency.code, self._to_currency.code

    def convert(self, money: Money) -> Money:
        """Convert $money into `to_currency`.

        The product `money.amount * rate` is computed exactly and then rounded half-up to
        the exponent of `to_currency`.

        Raises:
            CurrencyMismatchError: If $money is not in `from_currency`.
        """
        if not isinstance(money, Money):
            raise TypeError(f"$money must be a Money instance, but provided value is: {money}")

        if money.currency != self._from_currency:
            raise CurrencyMismatchError(money.currency, self._from_currency, "convert")

        converted = exact_multiply(money.amount, self._rate)
        return Money(round_to_exponent(converted, self._to_currency.exponent, CONVERSION_ROUNDING), self._to_currency)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ExchangeRate):
            return False
        return self.pair == other.pair and self._rate == other._rate

    def __hash__(self) -> int:
        return hash((self.pair, self._rate))

    def __str__(self) -> str:
        """Return string like 'USD/EUR 1.1'."""
        return f"{self._from_currency.code}/{self._to_currency.code} {self._rate}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._from_currency.code}, {self._to_currency.code}, '{self._rate}')"
