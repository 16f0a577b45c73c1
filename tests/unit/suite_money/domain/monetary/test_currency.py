from __future__ import annotations

import pytest

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.currency_registry import AED, BHD, EUR, INR, USD
from suite_money.domain.monetary.locale import EN_EU, EN_IN, EN_US
from suite_money.errors import UnknownCurrencyError


def test_lookup_by_alpha_code() -> None:
    assert Currency.from_str("USD") is USD
    assert Currency.from_str("EUR") is EUR


def test_lookup_is_case_sensitive() -> None:
    with pytest.raises(UnknownCurrencyError) as info:
        Currency.from_str("usd")
    assert info.value.code == "usd"


def test_unknown_alpha_code() -> None:
    with pytest.raises(UnknownCurrencyError):
        Currency.from_str("XYZ")


def test_lookup_by_numeric_code() -> None:
    assert Currency.from_numeric_code("978") is EUR
    assert Currency.from_numeric_code("048") is BHD


def test_unknown_numeric_code() -> None:
    with pytest.raises(UnknownCurrencyError) as info:
        Currency.from_numeric_code("999")
    assert info.value.code == "999"


def test_unknown_currency_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Currency.from_str("XYZ")


def test_catalog_descriptors() -> None:
    assert (USD.symbol, USD.exponent, USD.symbol_first, USD.default_locale) == ("$", 2, True, EN_US)
    assert (EUR.symbol, EUR.default_locale) == ("€", EN_EU)
    assert (BHD.exponent, BHD.numeric_code) == (3, "048")
    assert AED.symbol_first is False
    assert INR.default_locale is EN_IN
    assert USD.name == "United States Dollar"


def test_all_lists_catalog() -> None:
    codes = [c.code for c in Currency.all()]
    assert {"AED", "BHD", "EUR", "GBP", "INR", "USD"} <= set(codes)


def test_resolve_accepts_currency_or_code() -> None:
    assert Currency.resolve(USD) is USD
    assert Currency.resolve("USD") is USD


def test_register_rejects_duplicate_without_overwrite() -> None:
    duplicate = Currency("USD", "840", "United States Dollar", "$", 2, symbol_first=True, default_locale=EN_US)
    with pytest.raises(ValueError):
        Currency.register(duplicate)


@pytest.fixture
def isolated_catalog(monkeypatch):
    # Work on copies so registrations made by a test never leak into the shared catalog
    monkeypatch.setattr(Currency, "_registry", dict(Currency._registry))
    monkeypatch.setattr(Currency, "_numeric_index", dict(Currency._numeric_index))


def test_register_rejects_taken_numeric_code(isolated_catalog) -> None:
    clash = Currency("XTS", "840", "Test", "T", 0, symbol_first=False, default_locale=EN_US)
    with pytest.raises(ValueError, match="840"):
        Currency.register(clash)
    assert Currency.from_numeric_code("840") is USD
    with pytest.raises(UnknownCurrencyError):
        Currency.from_str("XTS")


def test_register_overwrite_takes_over_numeric_code(isolated_catalog) -> None:
    replacement = Currency("XTS", "840", "Test", "T", 0, symbol_first=False, default_locale=EN_US)
    Currency.register(replacement, overwrite=True)
    assert Currency.from_numeric_code("840") is replacement
    with pytest.raises(UnknownCurrencyError):
        Currency.from_str("USD")


def test_overwrite_with_new_numeric_code_drops_old_entry(isolated_catalog) -> None:
    renumbered = Currency("USD", "999", "United States Dollar", "$", 2, symbol_first=True, default_locale=EN_US)
    Currency.register(renumbered, overwrite=True)
    assert Currency.from_numeric_code("999") is renumbered
    assert Currency.from_str("USD") is renumbered
    with pytest.raises(UnknownCurrencyError):
        Currency.from_numeric_code("840")


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(code="", numeric_code="001", name="Test", symbol="T", exponent=2),
        dict(code="TST", numeric_code="abc", name="Test", symbol="T", exponent=2),
        dict(code="TST", numeric_code="001", name="Test", symbol="T", exponent=-1),
        dict(code="TST", numeric_code="001", name="Test", symbol="", exponent=2),
    ],
)
def test_invalid_descriptor_raises(kwargs) -> None:
    with pytest.raises(ValueError):
        Currency(symbol_first=True, default_locale=EN_US, **kwargs)


def test_equality_and_hash_by_code() -> None:
    same = Currency("USD", "840", "US Dollar", "US$", 2, symbol_first=True, default_locale=EN_US)
    assert same == USD
    assert hash(same) == hash(USD)
    assert str(USD) == "USD"
