from goldenzone.strategy.indicators.fibonacci import (
    FIB_RATIOS,
    GOLDEN_ZONE_RATIO,
    SHALLOW_RATIO,
    FibRatio,
    calculate_retracement_levels,
    golden_zone_level,
    shallow_level,
)

__all__ = [
    "FIB_RATIOS",
    "GOLDEN_ZONE_RATIO",
    "SHALLOW_RATIO",
    "FibRatio",
    "calculate_retracement_levels",
    "golden_zone_level",
    "shallow_level",
]
