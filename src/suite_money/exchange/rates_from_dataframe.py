from __future__ import annotations

# Bulk-load ExchangeRate(s) from a pandas DataFrame or a CSV file.
# Rates are read as strings so that Decimal sees the digits exactly as written.

import logging
from pathlib import Path
from typing import List

import pandas as pd

from suite_money.domain.monetary.currency import Currency
from suite_money.exchange.exchange import Exchange
from suite_money.exchange.exchange_rate import ExchangeRate

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("from_currency", "to_currency", "rate")


def rates_from_dataframe(df: pd.DataFrame) -> List[ExchangeRate]:
    """Build one `ExchangeRate` per row of $df.

    Input DataFrame has to meet these requirements:
    - Columns: from_currency, to_currency, rate. Extra columns are ignored.
    - Currency columns hold ISO alpha codes known to the catalog.
    - Rate values should be strings (e.g. read with `dtype=str`) to avoid float noise;
      numeric values are accepted and converted via `str`.

    Raises:
        ValueError: If $df is not a DataFrame or misses required columns.
        UnknownCurrencyError: If a row names an unknown currency.
        InvalidRateError: If a row holds an invalid rate.
    """
    # Check: $df must be a pandas DataFrame
    if not isinstance(df, pd.DataFrame):
        raise ValueError(f"Expected a pandas DataFrame, but received {type(df).__name__}. Please provide your rates as a pandas DataFrame.")

    # Check: required columns present
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        missing_cols = ", ".join(sorted(missing))
        raise ValueError(f"The provided DataFrame is missing required columns: {missing_cols}. Please ensure your DataFrame contains these columns: from_currency, to_currency, rate.")

    rates: List[ExchangeRate] = []
    for row in df.itertuples(index=False):
        from_currency = Currency.from_str(str(row.from_currency).strip())
        to_currency = Currency.from_str(str(row.to_currency).strip())
        rate_value = row.rate
        if not isinstance(rate_value, str):
            rate_value = str(rate_value)
        rates.append(ExchangeRate(from_currency, to_currency, rate_value.strip()))

    return rates


def load_rates_from_csv(path: str | Path, exchange: Exchange) -> int:
    """Read rates from the CSV file at $path and register them in $exchange.

    Rows are applied in file order, so a later row for the same pair replaces an earlier one.

    Returns:
        int: Number of rows registered.
    """
    df = pd.read_csv(path, dtype=str, skipinitialspace=True)
    rates = rates_from_dataframe(df)
    for rate in rates:
        exchange.add_or_update_rate(rate)

    logger.info(f"Loaded {len(rates)} exchange rate(s) from '{path}'")
    return len(rates)
