"""
Trend Classification

Orders the swing low and swing high in time. If the floor came first the
market climbed from it to the peak (uptrend); if the peak came first, or both
extremes sit on the same bar, the move is treated as a downtrend.
"""
from goldenzone.strategy.core.models import SwingPoints, TrendDirection


def detect_trend(swing_points: SwingPoints) -> TrendDirection:
    """Classify the trend of a swing high / swing low pair."""
    if swing_points.swing_low.date < swing_points.swing_high.date:
        return TrendDirection.UPTREND
    return TrendDirection.DOWNTREND
