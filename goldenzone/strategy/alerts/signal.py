"""
Signal Determination

Three-state decision over where the current price sits relative to the
shallow (23.6%) and Golden Zone (61.8%) retracement levels.
"""
from typing import Sequence

from goldenzone.strategy.alerts.narrative import signal_reason
from goldenzone.strategy.core.models import (
    RetracementLevel,
    SignalCategory,
    SignalDecision,
    TrendDirection,
)
from goldenzone.strategy.indicators.fibonacci import golden_zone_level, shallow_level


def classify_signal(
    current_price: float,
    levels: Sequence[RetracementLevel],
    trend: TrendDirection
) -> SignalCategory:
    """
    Classify the current price against the key retracement levels.

    Uptrend (levels sit below the peak):
        price >= shallow           -> favorable
        golden <= price < shallow  -> caution
        price < golden             -> unfavorable

    Downtrend (levels sit above the floor):
        price <= shallow           -> unfavorable
        shallow < price <= golden  -> caution
        price > golden             -> favorable
    """
    shallow = shallow_level(levels).price
    golden = golden_zone_level(levels).price

    if trend == TrendDirection.UPTREND:
        if current_price >= shallow:
            return SignalCategory.FAVORABLE
        if current_price >= golden:
            return SignalCategory.CAUTION
        return SignalCategory.UNFAVORABLE

    if current_price <= shallow:
        return SignalCategory.UNFAVORABLE
    if current_price <= golden:
        return SignalCategory.CAUTION
    return SignalCategory.FAVORABLE


def determine_signal(
    current_price: float,
    levels: Sequence[RetracementLevel],
    trend: TrendDirection
) -> SignalDecision:
    """Classify the current price and attach the rationale for the branch taken."""
    signal = classify_signal(current_price, levels, trend)
    return SignalDecision(signal=signal, reason=signal_reason(trend, signal))
