from __future__ import annotations

import logging
from typing import Dict, List

from suite_money.domain.monetary.locale import Locale
from suite_money.errors import UnknownCurrencyError

logger = logging.getLogger(__name__)


class Currency:
    """Represents an ISO 4217 currency with its display and rounding parameters.

    Attributes:
        code (str): ISO alpha-3 code (e.g., "USD"). Case-sensitive.
        numeric_code (str): ISO numeric code (e.g., "840").
        name (str): Full currency name.
        symbol (str): Display glyph (e.g., "$").
        exponent (int): Number of minor-unit decimal digits (2 for USD, 3 for BHD).
        symbol_first (bool): Whether the symbol is placed before the amount.
        default_locale (Locale): Formatting conventions used when no locale is given.
    """

    # Class-level registry for predefined currencies
    _registry: Dict[str, "Currency"] = {}
    _numeric_index: Dict[str, "Currency"] = {}

    def __init__(
        self,
        code: str,
        numeric_code: str,
        name: str,
        symbol: str,
        exponent: int,
        symbol_first: bool,
        default_locale: Locale,
    ):
        """Initialize a Currency instance.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If $default_locale is not Locale instance.
        """
        # Validate inputs
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        if not isinstance(numeric_code, str) or not numeric_code.isdigit():
            raise ValueError(f"$numeric_code must be a string of digits, but provided value is: '{numeric_code}'")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        if not isinstance(symbol, str) or not symbol:
            raise ValueError(f"$symbol must be a non-empty string, but provided value is: '{symbol}'")

        if isinstance(exponent, bool) or not isinstance(exponent, int) or exponent < 0 or exponent > 18:
            raise ValueError(f"$exponent must be an integer between 0 and 18, but provided value is: {exponent}")

        if not isinstance(default_locale, Locale):
            raise TypeError(f"$default_locale must be a Locale instance, but provided value is: {default_locale}")

        self._code = code.strip()
        self._numeric_code = numeric_code
        self._name = name.strip()
        self._symbol = symbol
        self._exponent = exponent
        self._symbol_first = bool(symbol_first)
        self._default_locale = default_locale

    @property
    def code(self) -> str:
        """Get the ISO alpha code."""
        return self._code

    @property
    def numeric_code(self) -> str:
        """Get the ISO numeric code."""
        return self._numeric_code

    @property
    def name(self) -> str:
        return self._name

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def exponent(self) -> int:
        """Get the number of minor-unit digits."""
        return self._exponent

    @property
    def symbol_first(self) -> bool:
        return self._symbol_first

    @property
    def default_locale(self) -> Locale:
        return self._default_locale

    @classmethod
    def register(cls, currency: "Currency", overwrite: bool = False) -> None:
        """Register a currency in the global registry.

        Args:
            currency (Currency): The currency to register.
            overwrite (bool): Whether to overwrite existing currency.

        Raises:
            ValueError: If currency already exists and overwrite is False.
            TypeError: If currency is not Currency instance.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        if currency.code in cls._registry and not overwrite:
            raise ValueError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")

        numeric_owner = cls._numeric_index.get(currency.numeric_code)
        if numeric_owner is not None and numeric_owner.code != currency.code and not overwrite:
            raise ValueError(f"Currency with numeric code '{currency.numeric_code}' already exists in registry as '{numeric_owner.code}'. Use overwrite=True to replace it.")

        # Drop index entries that would keep pointing at replaced descriptors
        replaced = cls._registry.get(currency.code)
        if replaced is not None and cls._numeric_index.get(replaced.numeric_code) is replaced:
            del cls._numeric_index[replaced.numeric_code]
        if numeric_owner is not None and numeric_owner.code != currency.code:
            del cls._registry[numeric_owner.code]

        cls._registry[currency.code] = currency
        cls._numeric_index[currency.numeric_code] = currency
        logger.debug(f"Registered Currency '{currency.code}' ({currency.numeric_code})")

    @classmethod
    def from_str(cls, code: str) -> "Currency":
        """Get currency from registry by alpha code.

        Args:
            code (str): ISO alpha-3 code to look up. Matching is case-sensitive.

        Returns:
            Currency: The currency instance.

        Raises:
            UnknownCurrencyError: If currency code is not found in registry.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        if code not in cls._registry:
            raise UnknownCurrencyError(code, list(cls._registry.keys()))

        return cls._registry[code]

    @classmethod
    def from_numeric_code(cls, numeric_code: str) -> "Currency":
        """Get currency from registry by ISO numeric code (e.g., "978" for EUR).

        Raises:
            UnknownCurrencyError: If numeric code is not found in registry.
        """
        if not isinstance(numeric_code, str):
            raise TypeError(f"$numeric_code must be a string, but provided value is: {numeric_code}")

        if numeric_code not in cls._numeric_index:
            raise UnknownCurrencyError(numeric_code, list(cls._numeric_index.keys()))

        return cls._numeric_index[numeric_code]

    @classmethod
    def resolve(cls, currency: "Currency | str") -> "Currency":
        """Accept either a Currency or its alpha code and return the Currency."""
        if isinstance(currency, Currency):
            return currency
        return cls.from_str(currency)

    @classmethod
    def all(cls) -> List["Currency"]:
        """Return all registered currencies in registration order."""
        return list(cls._registry.values())

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', '{self.numeric_code}', '{self.name}', '{self.symbol}', {self.exponent})"
