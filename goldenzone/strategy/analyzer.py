"""
Snapshot Analysis

Full single-snapshot pipeline: swing points -> trend -> retracement levels ->
signal -> narrative.
"""
from typing import Optional

from goldenzone.shared.decimal_utils import round_half_up
from goldenzone.strategy.alerts.narrative import trend_label, trend_narrative
from goldenzone.strategy.alerts.signal import determine_signal
from goldenzone.strategy.core.errors import EmptyInputError
from goldenzone.strategy.core.models import AnalysisResult
from goldenzone.strategy.indicators.fibonacci import calculate_retracement_levels
from goldenzone.strategy.price_series import PriceInput, to_frame
from goldenzone.strategy.swing_high_low import detect_swing_points
from goldenzone.strategy.trend import detect_trend


def analyze(ticker: str, prices: PriceInput, current_price: Optional[float] = None) -> AnalysisResult:
    """
    Analyze a ticker's price history.

    Args:
        ticker: Symbol, upper-cased for display
        prices: PriceBars (oldest first) or a price DataFrame
        current_price: Price to classify; defaults to the last close

    Returns:
        AnalysisResult

    Raises:
        EmptyInputError: if there are no bars
    """
    df = to_frame(prices)
    if len(df) == 0:
        raise EmptyInputError(f"No price data supplied for {ticker.upper()}.")

    if current_price is None:
        current_price = float(df["close"].iloc[-1])

    swing = detect_swing_points(df)
    trend = detect_trend(swing)
    levels = calculate_retracement_levels(swing.swing_high.price, swing.swing_low.price, trend)
    decision = determine_signal(current_price, levels, trend)

    return AnalysisResult(
        ticker=ticker.upper(),
        trend=trend,
        trend_label=trend_label(trend),
        swing_high=swing.swing_high,
        swing_low=swing.swing_low,
        range=round_half_up(swing.range, 2),
        levels=levels,
        current_price=current_price,
        signal=decision.signal,
        reason=decision.reason,
        narrative=trend_narrative(trend, swing.swing_high, swing.swing_low),
    )
