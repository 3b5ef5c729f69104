"""
Swing High/Low Detection Module

This module finds the swing high and swing low that anchor a Fibonacci
retracement range. Two modes are supported:

- global: the absolute highest high and lowest low of the whole input
  (used for the single-snapshot analysis);
- rolling: the most extreme bars that are also local extremes of a centred
  window of 'lookback' bars on each side (used by the backtest walker).
"""
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from goldenzone.strategy.core.errors import EmptyInputError
from goldenzone.strategy.core.models import SwingPoint, SwingPoints
from goldenzone.strategy.price_series import PriceInput, to_frame


def detect_swing_points(prices: PriceInput, lookback: Optional[int] = None) -> SwingPoints:
    """
    Find the swing high and swing low of a price window.

    Args:
        prices: PriceBars (oldest first) or a price DataFrame with 'date',
                'high' and 'low' columns
        lookback: None for the global scan, otherwise the number of bars on
                  each side a rolling-window swing must dominate

    Returns:
        SwingPoints with the swing high and swing low

    Raises:
        EmptyInputError: if there are no bars
    """
    df = to_frame(prices)
    if len(df) == 0:
        raise EmptyInputError("Price data is empty, cannot detect swing points.")

    if lookback is None:
        high_idx, low_idx = _global_extremes(df)
    else:
        high_idx, low_idx = _rolling_extremes(df, lookback)

    dates = df["date"]
    return SwingPoints(
        swing_high=SwingPoint(price=float(df["high"].iloc[high_idx]), date=dates.iloc[high_idx]),
        swing_low=SwingPoint(price=float(df["low"].iloc[low_idx]), date=dates.iloc[low_idx]),
    )


def _global_extremes(df: pd.DataFrame) -> Tuple[int, int]:
    """Positions of the maximum high and minimum low (first occurrence wins)."""
    highs = df["high"].to_numpy(dtype=float)
    lows = df["low"].to_numpy(dtype=float)
    return int(np.argmax(highs)), int(np.argmin(lows))


def _rolling_extremes(df: pd.DataFrame, lookback: int) -> Tuple[int, int]:
    """
    Positions of the rolling-window swing high and swing low.

    A bar i with lookback <= i < len(df) - lookback is a swing high candidate
    when its high equals the maximum of the closed window [i - lookback,
    i + lookback]. The candidate with the largest high wins, the earliest one
    on ties. Lows mirror this with minima. A side with no candidate falls
    back to the global extreme.
    """
    if lookback < 0:
        raise ValueError(f"lookback must be non-negative, got {lookback}")

    global_high_idx, global_low_idx = _global_extremes(df)

    # Need at least 2*lookback+1 bars to have an interior bar
    rolling_window = 2 * lookback + 1
    if len(df) < rolling_window:
        return global_high_idx, global_low_idx

    high = df["high"].astype(float)
    low = df["low"].astype(float)

    # Centred windows are NaN wherever the full window does not fit, which
    # excludes the first and last 'lookback' bars. NaN never compares equal.
    swing_high_mask = (high == high.rolling(window=rolling_window, center=True).max()).to_numpy()
    swing_low_mask = (low == low.rolling(window=rolling_window, center=True).min()).to_numpy()

    if swing_high_mask.any():
        high_idx = int(np.argmax(np.where(swing_high_mask, high.to_numpy(), -np.inf)))
    else:
        high_idx = global_high_idx

    if swing_low_mask.any():
        low_idx = int(np.argmin(np.where(swing_low_mask, low.to_numpy(), np.inf)))
    else:
        low_idx = global_low_idx

    return high_idx, low_idx
