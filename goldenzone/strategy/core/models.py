"""
Data models for the Golden Zone engine.
"""
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Any


class TrendDirection(str, Enum):
    """Direction of the move between the swing low and the swing high."""
    UPTREND = "uptrend"
    DOWNTREND = "downtrend"


class SignalCategory(str, Enum):
    """Three ordered bands shared by retracement levels and the snapshot signal."""
    FAVORABLE = "favorable"
    CAUTION = "caution"
    UNFAVORABLE = "unfavorable"


class Outcome(str, Enum):
    """Result of a Golden Zone touch after the outcome horizon."""
    SUCCESS = "success"
    FAIL = "fail"


@dataclass(frozen=True)
class PriceBar:
    """One daily OHLCV bar."""
    date: date
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "volume": self.volume,
        }


@dataclass(frozen=True)
class SwingPoint:
    """An extreme price tied to the bar that produced it."""
    price: float
    date: date

    def to_dict(self) -> Dict[str, Any]:
        return {"price": self.price, "date": self.date.isoformat()}


@dataclass(frozen=True)
class SwingPoints:
    """Swing high / swing low pair anchoring a retracement range."""
    swing_high: SwingPoint
    swing_low: SwingPoint

    @property
    def range(self) -> float:
        return self.swing_high.price - self.swing_low.price


@dataclass(frozen=True)
class RetracementLevel:
    """A Fibonacci ratio applied to the swing range."""
    ratio: float
    price: float
    is_golden_zone: bool
    category: SignalCategory
    label: str = ""
    friendly_name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ratio": self.ratio,
            "label": self.label,
            "friendly_name": self.friendly_name,
            "price": self.price,
            "is_golden_zone": self.is_golden_zone,
            "category": self.category.value,
        }


@dataclass(frozen=True)
class SignalDecision:
    """Signal category plus the rationale for the branch that produced it."""
    signal: SignalCategory
    reason: str


@dataclass
class AnalysisResult:
    """Container for a single-snapshot analysis of one ticker."""
    ticker: str
    trend: TrendDirection
    trend_label: str
    swing_high: SwingPoint
    swing_low: SwingPoint
    range: float
    levels: List[RetracementLevel]
    current_price: float
    signal: SignalCategory
    reason: str
    narrative: str

    @property
    def golden_zone(self) -> RetracementLevel:
        return next(level for level in self.levels if level.is_golden_zone)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ticker": self.ticker,
            "trend": self.trend.value,
            "trend_label": self.trend_label,
            "swing_high": self.swing_high.to_dict(),
            "swing_low": self.swing_low.to_dict(),
            "range": self.range,
            "levels": [level.to_dict() for level in self.levels],
            "current_price": self.current_price,
            "signal": self.signal.value,
            "reason": self.reason,
            "narrative": self.narrative,
        }


@dataclass(frozen=True)
class Touch:
    """A backtest event: a close inside the Golden Zone tolerance band."""
    index: int
    date: date
    touch_price: float
    golden_level_price: float
    trend: TrendDirection
    price_after_horizon: float
    percent_change: float
    outcome: Outcome

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "date": self.date.isoformat(),
            "touch_price": self.touch_price,
            "golden_level_price": self.golden_level_price,
            "trend": self.trend.value,
            "price_after_horizon": self.price_after_horizon,
            "percent_change": self.percent_change,
            "outcome": self.outcome.value,
        }


@dataclass
class BacktestResult:
    """Aggregate of every Golden Zone touch found in a price history."""
    ticker: str
    total_bars: int
    touches: List[Touch] = field(default_factory=list)
    successes: int = 0
    failures: int = 0
    win_rate: float = 0.0
    summary: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ticker": self.ticker,
            "total_bars": self.total_bars,
            "touches": [touch.to_dict() for touch in self.touches],
            "successes": self.successes,
            "failures": self.failures,
            "win_rate": self.win_rate,
            "summary": self.summary,
        }
