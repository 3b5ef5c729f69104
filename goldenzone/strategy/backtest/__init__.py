from goldenzone.strategy.backtest.golden_zone import (
    COOLDOWN_BARS,
    MIN_BARS,
    OUTCOME_HORIZON,
    SWING_LOOKBACK,
    SWING_WINDOW,
    TOUCH_TOLERANCE,
    backtest,
)

__all__ = [
    "COOLDOWN_BARS",
    "MIN_BARS",
    "OUTCOME_HORIZON",
    "SWING_LOOKBACK",
    "SWING_WINDOW",
    "TOUCH_TOLERANCE",
    "backtest",
]
