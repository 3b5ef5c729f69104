"""
Price Series Helpers

Converts PriceBar sequences and caller-supplied frames into the pandas
DataFrame layout the swing detector works on ('date', 'open', 'high', 'low', 'close',
'volume' columns, oldest bar first, positional index).
"""
from datetime import date, datetime
from typing import Sequence, Union

import pandas as pd

from goldenzone.strategy.core.models import PriceBar

PRICE_COLUMNS = ["date", "open", "high", "low", "close", "volume"]

PriceInput = Union[Sequence[PriceBar], pd.DataFrame]


def _holds_dates(column: pd.Series) -> bool:
    """True when the column already holds plain datetime.date values."""
    first = column.iloc[0]
    return isinstance(first, date) and not isinstance(first, datetime)


def to_frame(prices: PriceInput) -> pd.DataFrame:
    """
    Build a price DataFrame from PriceBars.

    DataFrames are copied with a fresh positional index so that callers can
    hand in slices of a larger frame. Their 'date' column (ISO strings,
    Timestamps or dates) is normalized to datetime.date.

    Args:
        prices: Sequence of PriceBar (oldest first) or a price DataFrame

    Returns:
        DataFrame with lowercase OHLCV columns and a 0..n-1 index
    """
    if isinstance(prices, pd.DataFrame):
        df = prices.reset_index(drop=True)
        if len(df) > 0 and not _holds_dates(df["date"]):
            df["date"] = pd.to_datetime(df["date"]).dt.date
        return df

    return pd.DataFrame(
        {
            "date": [bar.date for bar in prices],
            "open": [float(bar.open) for bar in prices],
            "high": [float(bar.high) for bar in prices],
            "low": [float(bar.low) for bar in prices],
            "close": [float(bar.close) for bar in prices],
            "volume": [float(bar.volume) for bar in prices],
        },
        columns=PRICE_COLUMNS,
    )

