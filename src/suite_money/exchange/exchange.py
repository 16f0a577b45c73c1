from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional, Tuple

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.money import Money
from suite_money.errors import RateNotFoundError
from suite_money.exchange.exchange_rate import ExchangeRate

logger = logging.getLogger(__name__)


class Exchange:
    """Registry of exchange rates keyed by ordered currency pair.

    At most one rate is stored per (from, to) pair; registering the pair again replaces the
    previous rate. No inverse or cross rates are derived, so register each direction you
    need to convert in.

    All reads and writes hold one lock, so concurrent callers never observe a partially
    updated registry.
    """

    def __init__(self):
        # (from_code, to_code) -> ExchangeRate
        self._rates: Dict[Tuple[str, str], ExchangeRate] = {}
        self._lock = threading.Lock()

    def add_or_update_rate(self, rate: ExchangeRate) -> None:
        """Store $rate, replacing any rate registered for the same ordered pair.

        Raises:
            TypeError: If $rate is not ExchangeRate instance.
        """
        if not isinstance(rate, ExchangeRate):
            raise TypeError(f"$rate must be an ExchangeRate instance, but provided value is: {rate}")

        with self._lock:
            previous = self._rates.get(rate.pair)
            self._rates[rate.pair] = rate

        if previous is None:
            logger.debug(f"Exchange added rate {rate}")
        else:
            logger.debug(f"Exchange replaced rate {previous} with {rate}")

    def get_rate(self, from_currency: Currency | str, to_currency: Currency | str) -> ExchangeRate:
        """Return the rate for the ordered pair.

        Raises:
            RateNotFoundError: If no rate is registered for the pair.
        """
        pair = self._pair(from_currency, to_currency)
        with self._lock:
            rate = self._rates.get(pair)
        if rate is None:
            raise RateNotFoundError(*pair)
        return rate

    def find_rate(self, from_currency: Currency | str, to_currency: Currency | str) -> Optional[ExchangeRate]:
        """Return the rate for the ordered pair, or None if it is not registered."""
        pair = self._pair(from_currency, to_currency)
        with self._lock:
            return self._rates.get(pair)

    def remove_rate(self, from_currency: Currency | str, to_currency: Currency | str) -> ExchangeRate:
        """Remove and return the rate for the ordered pair.

        Raises:
            RateNotFoundError: If no rate is registered for the pair.
        """
        pair = self._pair(from_currency, to_currency)
        with self._lock:
            rate = self._rates.pop(pair, None)
        if rate is None:
            raise RateNotFoundError(*pair)
        logger.debug(f"Exchange removed rate {rate}")
        return rate

    def rates(self) -> List[ExchangeRate]:
        """Return a snapshot of all registered rates."""
        with self._lock:
            return list(self._rates.values())

    def convert(self, money: Money, to_currency: Currency | str) -> Money:
        """Convert $money into $to_currency using the registered rate for that direction.

        Raises:
            RateNotFoundError: If no rate is registered for (money.currency, to_currency).
        """
        return self.get_rate(money.currency, to_currency).convert(money)

    def __len__(self) -> int:
        with self._lock:
            return len(self._rates)

    def __contains__(self, pair) -> bool:
        """Check whether a rate is registered for a (from, to) tuple of currencies or codes.

        Anything that is not a 2-tuple is never contained.
        """
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        from_currency, to_currency = pair
        return self.find_rate(from_currency, to_currency) is not None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rates={len(self)})"

    @staticmethod
    def _pair(from_currency: Currency | str, to_currency: Currency | str) -> Tuple[str, str]:
        return Currency.resolve(from_currency).code, Currency.resolve(to_currency).code
