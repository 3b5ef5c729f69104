"""
Golden Zone Backtest

Walks a daily price history with a trailing window and, every time the close
"touches" the 61.8% retracement level of that window, records what the price
did OUTCOME_HORIZON bars later.

A touch is a success when price moved the way the level is expected to push
it: up after touching support in an uptrend retracement, down after touching
resistance in a downtrend retracement. An unchanged price is a fail in both
directions.
"""
import math
from typing import List

from goldenzone.shared.decimal_utils import round_half_up
from goldenzone.strategy.alerts.narrative import backtest_summary
from goldenzone.strategy.core.errors import InsufficientDataError
from goldenzone.strategy.core.models import BacktestResult, Outcome, Touch, TrendDirection
from goldenzone.strategy.indicators.fibonacci import calculate_retracement_levels, golden_zone_level
from goldenzone.strategy.price_series import PriceInput, to_frame
from goldenzone.strategy.swing_high_low import detect_swing_points
from goldenzone.strategy.trend import detect_trend

# Trailing bars used to find the swing points of each window
SWING_WINDOW = 120

# Bars on each side a swing must dominate inside the window
SWING_LOOKBACK = 10

# Touch zone around the Golden Zone level, as a fraction of the swing range
TOUCH_TOLERANCE = 0.015

# Bars ahead at which the outcome of a touch is measured
OUTCOME_HORIZON = 30

# Minimum bar gap between two recorded touches
COOLDOWN_BARS = 10

MIN_BARS = SWING_WINDOW + OUTCOME_HORIZON


def backtest(ticker: str, prices: PriceInput) -> BacktestResult:
    """
    Backtest how often the Golden Zone held as support/resistance.

    Args:
        ticker: Symbol, upper-cased for display
        prices: PriceBars (oldest first) or a price DataFrame

    Returns:
        BacktestResult with every recorded touch in date order

    Raises:
        InsufficientDataError: if there are not more than
            SWING_WINDOW + OUTCOME_HORIZON bars
    """
    df = to_frame(prices)
    total_bars = len(df)
    if total_bars <= MIN_BARS:
        raise InsufficientDataError(required=MIN_BARS, actual=total_bars)

    ticker = ticker.upper()
    dates = df["date"].tolist()
    closes = df["close"].astype(float).tolist()

    touches: List[Touch] = []
    last_touch_index = -math.inf

    for i in range(SWING_WINDOW, total_bars - OUTCOME_HORIZON):
        if i - last_touch_index < COOLDOWN_BARS:
            continue

        window = df.iloc[i - SWING_WINDOW:i]
        swing = detect_swing_points(window, lookback=SWING_LOOKBACK)
        trend = detect_trend(swing)
        levels = calculate_retracement_levels(swing.swing_high.price, swing.swing_low.price, trend)
        golden = golden_zone_level(levels)

        price_range = swing.range
        if price_range <= 0:
            continue

        close = closes[i]
        if abs(close - golden.price) > price_range * TOUCH_TOLERANCE:
            continue

        future_close = closes[i + OUTCOME_HORIZON]
        pct_change = (future_close - close) / close * 100

        if trend == TrendDirection.UPTREND:
            outcome = Outcome.SUCCESS if pct_change > 0 else Outcome.FAIL
        else:
            outcome = Outcome.SUCCESS if pct_change < 0 else Outcome.FAIL

        touches.append(
            Touch(
                index=i,
                date=dates[i],
                touch_price=close,
                golden_level_price=golden.price,
                trend=trend,
                price_after_horizon=future_close,
                percent_change=round_half_up(pct_change, 2),
                outcome=outcome,
            )
        )
        last_touch_index = i

    successes = sum(1 for touch in touches if touch.outcome == Outcome.SUCCESS)
    failures = len(touches) - successes
    win_rate = round_half_up(successes / len(touches) * 100, 1) if touches else 0.0

    return BacktestResult(
        ticker=ticker,
        total_bars=total_bars,
        touches=touches,
        successes=successes,
        failures=failures,
        win_rate=win_rate,
        summary=backtest_summary(ticker, total_bars, successes, failures, win_rate),
    )
