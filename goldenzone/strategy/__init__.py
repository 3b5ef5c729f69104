"""
Golden Zone engine: swing detection, trend classification, Fibonacci
retracement levels, signal determination and the Golden Zone backtest.
"""
from goldenzone.strategy.alerts.signal import classify_signal, determine_signal
from goldenzone.strategy.analyzer import analyze
from goldenzone.strategy.backtest.golden_zone import backtest
from goldenzone.strategy.core.errors import (
    EmptyInputError,
    GoldenZoneError,
    InsufficientDataError,
)
from goldenzone.strategy.core.models import (
    AnalysisResult,
    BacktestResult,
    Outcome,
    PriceBar,
    RetracementLevel,
    SignalCategory,
    SignalDecision,
    SwingPoint,
    SwingPoints,
    Touch,
    TrendDirection,
)
from goldenzone.strategy.indicators.fibonacci import calculate_retracement_levels
from goldenzone.strategy.swing_high_low import detect_swing_points
from goldenzone.strategy.trend import detect_trend

__all__ = [
    "AnalysisResult",
    "BacktestResult",
    "EmptyInputError",
    "GoldenZoneError",
    "InsufficientDataError",
    "Outcome",
    "PriceBar",
    "RetracementLevel",
    "SignalCategory",
    "SignalDecision",
    "SwingPoint",
    "SwingPoints",
    "Touch",
    "TrendDirection",
    "analyze",
    "backtest",
    "calculate_retracement_levels",
    "classify_signal",
    "detect_swing_points",
    "detect_trend",
    "determine_signal",
]
