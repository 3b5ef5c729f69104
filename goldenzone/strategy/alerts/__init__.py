from goldenzone.strategy.alerts.narrative import (
    DISCLAIMER,
    backtest_summary,
    signal_reason,
    trend_label,
    trend_narrative,
)
from goldenzone.strategy.alerts.signal import classify_signal, determine_signal

__all__ = [
    "DISCLAIMER",
    "backtest_summary",
    "classify_signal",
    "determine_signal",
    "signal_reason",
    "trend_label",
    "trend_narrative",
]
