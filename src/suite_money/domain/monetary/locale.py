from __future__ import annotations

import logging
from typing import Dict

from suite_money.errors import UnknownLocaleError

logger = logging.getLogger(__name__)


class Locale:
    """Number formatting conventions used to display and parse money.

    Attributes:
        id (str): Locale identifier (e.g., "en-US").
        decimal_separator (str): Character between integer and fractional digits.
        grouping_separator (str): Character inserted between digit groups of the integer part.
        grouping_sizes (tuple[int, ...]): Group sizes counted from the least-significant digit.
            The last size repeats for all remaining groups, so (3,) is plain thousands grouping
            and (3, 2) is the Indian lakh/crore grouping.
    """

    # Class-level registry for predefined locales
    _registry: Dict[str, "Locale"] = {}

    def __init__(self, id: str, decimal_separator: str, grouping_separator: str, grouping_sizes: tuple[int, ...] = (3,)):
        """Initialize a Locale instance.

        Raises:
            ValueError: If separators are not distinct single non-digit characters,
                or if $grouping_sizes is empty or holds non-positive values.
        """
        if not isinstance(id, str) or not id.strip():
            raise ValueError(f"$id must be a non-empty string, but provided value is: '{id}'")

        for name, separator in (("decimal_separator", decimal_separator), ("grouping_separator", grouping_separator)):
            if not isinstance(separator, str) or len(separator) != 1 or separator.isdigit():
                raise ValueError(f"${name} must be a single non-digit character, but provided value is: '{separator}'")

        if decimal_separator == grouping_separator:
            raise ValueError(f"$decimal_separator and $grouping_separator must differ, but both are: '{decimal_separator}'")

        grouping_sizes = tuple(grouping_sizes)
        if not grouping_sizes or any(not isinstance(size, int) or size <= 0 for size in grouping_sizes):
            raise ValueError(f"$grouping_sizes must be a non-empty sequence of positive integers, but provided value is: {grouping_sizes}")

        self._id = id.strip()
        self._decimal_separator = decimal_separator
        self._grouping_separator = grouping_separator
        self._grouping_sizes = grouping_sizes

    @property
    def id(self) -> str:
        return self._id

    @property
    def decimal_separator(self) -> str:
        return self._decimal_separator

    @property
    def grouping_separator(self) -> str:
        return self._grouping_separator

    @property
    def grouping_sizes(self) -> tuple[int, ...]:
        return self._grouping_sizes

    @property
    def grouping_width(self) -> int:
        """Size of the least-significant digit group."""
        return self._grouping_sizes[0]

    def group_digits(self, digits: str) -> str:
        """Insert the grouping separator into a string of integer digits.

        Args:
            digits (str): Integer digits without sign, e.g. "2000000".

        Returns:
            str: Grouped digits, e.g. "2,000,000" for plain thousands grouping.
        """
        groups = []
        remaining = digits
        sizes = iter(self._grouping_sizes)
        size = next(sizes)
        while len(remaining) > size:
            groups.append(remaining[-size:])
            remaining = remaining[:-size]
            size = next(sizes, size)
        groups.append(remaining)
        return self._grouping_separator.join(reversed(groups))

    @classmethod
    def register(cls, locale: "Locale", overwrite: bool = False) -> None:
        """Register a locale in the global registry.

        Raises:
            ValueError: If locale already exists and overwrite is False.
            TypeError: If locale is not Locale instance.
        """
        if not isinstance(locale, Locale):
            raise TypeError(f"$locale must be a Locale instance, but provided value is: {locale}")

        if locale.id in cls._registry and not overwrite:
            raise ValueError(f"Locale with id '{locale.id}' already exists in registry. Use overwrite=True to replace it.")

        cls._registry[locale.id] = locale
        logger.debug(f"Registered Locale '{locale.id}'")

    @classmethod
    def from_str(cls, locale_id: str) -> "Locale":
        """Get locale from registry by id.

        Raises:
            UnknownLocaleError: If locale id is not found in registry.
        """
        if not isinstance(locale_id, str):
            raise TypeError(f"$locale_id must be a string, but provided value is: {locale_id}")

        if locale_id not in cls._registry:
            raise UnknownLocaleError(locale_id, list(cls._registry.keys()))

        return cls._registry[locale_id]

    @classmethod
    def resolve(cls, locale: "Locale | str") -> "Locale":
        """Accept either a Locale or its id and return the Locale."""
        if isinstance(locale, Locale):
            return locale
        return cls.from_str(locale)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Locale):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.id}', '{self.decimal_separator}', '{self.grouping_separator}', {self.grouping_sizes})"


# Predefined locales
EN_US = Locale("en-US", decimal_separator=".", grouping_separator=",", grouping_sizes=(3,))
EN_EU = Locale("en-EU", decimal_separator=",", grouping_separator=".", grouping_sizes=(3,))
EN_IN = Locale("en-IN", decimal_separator=".", grouping_separator=",", grouping_sizes=(3, 2))

Locale.register(EN_US, overwrite=True)
Locale.register(EN_EU, overwrite=True)
Locale.register(EN_IN, overwrite=True)
