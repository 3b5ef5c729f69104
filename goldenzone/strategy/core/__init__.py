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
]
