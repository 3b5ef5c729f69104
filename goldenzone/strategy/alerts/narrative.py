"""
Narrative Text

Plain-English rendering of the engine's structured output. Everything here is
probability-framed ("likely", "historically"); nothing promises an outcome.
The decision logic lives in alerts.signal; this module only turns its results
into sentences.
"""
from datetime import date

from goldenzone.strategy.core.models import SignalCategory, SwingPoint, TrendDirection

DISCLAIMER = (
    "This tool shows historical patterns and probabilities, not guarantees. "
    "Always do your own research before making any trading decisions."
)

TREND_LABELS = {
    TrendDirection.UPTREND: "Growth Era",
    TrendDirection.DOWNTREND: "Cooling Off",
}

SIGNAL_REASONS = {
    (TrendDirection.UPTREND, SignalCategory.FAVORABLE): (
        "Price is holding above the shallow pullback. Historically, momentum "
        "is likely still strong here."
    ),
    (TrendDirection.UPTREND, SignalCategory.CAUTION): (
        "Price is near the Sweet Spot (61.8%). Historically this is a "
        "make-or-break level, so waiting for confirmation is usually wiser."
    ),
    (TrendDirection.UPTREND, SignalCategory.UNFAVORABLE): (
        "Price has dropped past the Sweet Spot. The pullback is deep and "
        "momentum is likely fading."
    ),
    (TrendDirection.DOWNTREND, SignalCategory.UNFAVORABLE): (
        "Price is still near the floor with weak bounce energy. The downtrend "
        "is likely continuing."
    ),
    (TrendDirection.DOWNTREND, SignalCategory.CAUTION): (
        "Price is bouncing toward the Sweet Spot. Historically, sellers often "
        "step back in here, so it may pay to wait and watch."
    ),
    (TrendDirection.DOWNTREND, SignalCategory.FAVORABLE): (
        "Price has bounced strongly past the Sweet Spot. Momentum may be "
        "shifting and a reversal is likely forming."
    ),
}


def trend_label(trend: TrendDirection) -> str:
    """Friendly name of a trend direction."""
    return TREND_LABELS[trend]


def signal_reason(trend: TrendDirection, signal: SignalCategory) -> str:
    """Rationale text for a (trend, signal) branch of the decision table."""
    return SIGNAL_REASONS[(trend, signal)]


def friendly_date(value: date) -> str:
    """Format a date like 'Jan 3, 2022'."""
    return f"{value:%b} {value.day}, {value.year}"


def trend_narrative(trend: TrendDirection, swing_high: SwingPoint, swing_low: SwingPoint) -> str:
    """
    Explain the current setup in one paragraph.

    Example (uptrend):
        "The stock is in a Growth Era. It hit The Floor at $128.50 on
         Jan 3, 2023 and has been climbing since, reaching The Peak at
         $198.23 on Dec 14, 2024. ..."
    """
    peak = f"${swing_high.price:.2f} on {friendly_date(swing_high.date)}"
    floor = f"${swing_low.price:.2f} on {friendly_date(swing_low.date)}"

    if trend == TrendDirection.UPTREND:
        return (
            f"The stock is in a Growth Era. "
            f"It hit The Floor at {floor} and has been climbing since, "
            f"reaching The Peak at {peak}. "
            f"We're now looking for where it might catch its breath (pull back) "
            f"before the next push."
        )

    return (
        f"The stock is in a Cooling Off phase. "
        f"It hit The Peak at {peak} and has been sliding since, "
        f"dropping to The Floor at {floor}. "
        f"We're watching for where it might find its footing and bounce."
    )


def backtest_summary(ticker: str, total_bars: int, successes: int, failures: int, win_rate: float) -> str:
    """One-sentence summary of a Golden Zone backtest."""
    touches = successes + failures
    if touches == 0:
        return (
            f"No Golden Zone touches were detected in {total_bars} trading days "
            f"of {ticker} data."
        )

    plural = "" if failures == 1 else "s"
    return (
        f"Over {total_bars} trading days of {ticker} data, the Golden Zone held "
        f"{successes} times out of {touches} ({win_rate:g}% win rate). "
        f"It didn't hold {failures} time{plural}."
    )
