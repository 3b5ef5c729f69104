"""
Fibonacci Retracement Levels

This module maps the fixed Fibonacci ratio table onto a swing range. Uses
Decimal for the arithmetic so that level prices round half-up exactly the way
they are displayed (e.g. 200 - 100 * 0.618 is 138.20, not 138.19999...).
"""
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from goldenzone.shared.decimal_utils import quantize_half_up, to_decimal_safe
from goldenzone.strategy.core.models import RetracementLevel, SignalCategory, TrendDirection


@dataclass(frozen=True)
class FibRatio:
    """One row of the ratio table."""
    ratio: float
    label: str
    friendly_name: str
    category: SignalCategory


GOLDEN_ZONE_RATIO = 0.618
SHALLOW_RATIO = 0.236

# Ascending; the category of a ratio does not depend on the trend
FIB_RATIOS: Tuple[FibRatio, ...] = (
    FibRatio(0.236, "23.6%", "Shallow Pullback", SignalCategory.FAVORABLE),
    FibRatio(0.382, "38.2%", "Moderate Pullback", SignalCategory.FAVORABLE),
    FibRatio(0.5, "50.0%", "Halfway Point", SignalCategory.CAUTION),
    FibRatio(0.618, "61.8%", "The Sweet Spot", SignalCategory.CAUTION),
    FibRatio(0.786, "78.6%", "Deep Pullback", SignalCategory.UNFAVORABLE),
)

PRICE_PLACES = 2


def calculate_retracement_levels(
    high: float,
    low: float,
    trend: TrendDirection
) -> List[RetracementLevel]:
    """
    Calculate the five retracement levels of a swing range.

    Uptrend:   level = high - (high - low) * ratio   (pullback from the peak)
    Downtrend: level = low  + (high - low) * ratio   (bounce from the floor)

    Prices are rounded half-up to cents and then clamped into [low, high].
    When the swing prices carry sub-cent digits, a level that rounds past
    them takes the swing price itself, which is not a 2-decimal value.

    Args:
        high: Swing high price
        low: Swing low price (high >= low; equal prices give a zero-width range)
        trend: Direction the range was traversed in

    Returns:
        List of RetracementLevel in ascending ratio order
    """
    high_decimal = to_decimal_safe(high)
    low_decimal = to_decimal_safe(low)
    price_diff = high_decimal - low_decimal

    levels: List[RetracementLevel] = []
    for fib in FIB_RATIOS:
        factor = to_decimal_safe(fib.ratio)
        if trend == TrendDirection.UPTREND:
            level_decimal = high_decimal - price_diff * factor
        else:
            level_decimal = low_decimal + price_diff * factor

        level_decimal = quantize_half_up(level_decimal, PRICE_PLACES)

        # Rounding can step outside a sub-cent range; keep the level inside it
        level_decimal = max(low_decimal, min(high_decimal, level_decimal))

        levels.append(
            RetracementLevel(
                ratio=fib.ratio,
                price=float(level_decimal),
                is_golden_zone=fib.ratio == GOLDEN_ZONE_RATIO,
                category=fib.category,
                label=fib.label,
                friendly_name=fib.friendly_name,
            )
        )

    return levels


def find_level(levels: Sequence[RetracementLevel], ratio: float) -> RetracementLevel:
    """Look up the level for a ratio of the table."""
    for level in levels:
        if level.ratio == ratio:
            return level
    raise KeyError(f"No retracement level for ratio {ratio}")


def golden_zone_level(levels: Sequence[RetracementLevel]) -> RetracementLevel:
    """The 61.8% level."""
    return find_level(levels, GOLDEN_ZONE_RATIO)


def shallow_level(levels: Sequence[RetracementLevel]) -> RetracementLevel:
    """The 23.6% level."""
    return find_level(levels, SHALLOW_RATIO)
