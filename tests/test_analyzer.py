"""Tests for the single-snapshot analysis pipeline."""

import json

import pandas as pd
import pytest

from goldenzone import analyze
from goldenzone.strategy.alerts.narrative import friendly_date
from goldenzone.strategy.core.errors import EmptyInputError
from goldenzone.strategy.core.models import SignalCategory, TrendDirection
from goldenzone.strategy.price_series import to_frame

from tests.conftest import make_flat_bars


class TestRisingSeries:
    def test_uptrend_levels(self, rising_130):
        result = analyze("aapl", rising_130, 180.0)

        assert result.trend == TrendDirection.UPTREND
        assert result.trend_label == "Growth Era"
        assert result.swing_low.price == 100.0
        assert result.swing_low.date == rising_130[0].date
        assert result.swing_high.price == 200.0
        assert result.swing_high.date == rising_130[-1].date
        assert result.range == 100.0
        assert result.golden_zone.price == 138.2
        assert result.levels[0].ratio == 0.236
        assert result.levels[0].price == 176.4

    def test_price_above_shallow_level_is_favorable(self, rising_130):
        result = analyze("aapl", rising_130, 180.0)
        assert result.signal == SignalCategory.FAVORABLE
        assert "likely" in result.reason

    def test_defaults_to_last_close(self, rising_130):
        result = analyze("aapl", rising_130)
        assert result.current_price == 200.0
        assert result.signal == SignalCategory.FAVORABLE

    def test_ticker_is_upper_cased(self, rising_130):
        assert analyze("brk.b", rising_130).ticker == "BRK.B"

    def test_narrative_names_the_floor_then_the_peak(self, rising_130):
        narrative = analyze("aapl", rising_130).narrative
        assert narrative.startswith("The stock is in a Growth Era.")
        assert "$100.00" in narrative
        assert "$200.00" in narrative

    def test_accepts_a_dataframe(self, rising_130):
        from_bars = analyze("aapl", rising_130, 150.0)
        from_frame = analyze("aapl", to_frame(rising_130), 150.0)
        assert from_bars == from_frame

    @pytest.mark.parametrize("as_value", [lambda d: d.isoformat(), pd.Timestamp])
    def test_dataframe_dates_are_normalized(self, rising_130, as_value):
        frame = to_frame(rising_130)
        frame["date"] = [as_value(d) for d in frame["date"]]

        result = analyze("aapl", frame, 150.0)

        assert result == analyze("aapl", rising_130, 150.0)
        assert friendly_date(rising_130[-1].date) in result.narrative
        assert result.to_dict()["swing_high"]["date"] == rising_130[-1].date.isoformat()


class TestFallingSeries:
    def test_downtrend_levels_and_signal(self, falling_130):
        result = analyze("tsla", falling_130, 150.0)
        assert result.trend == TrendDirection.DOWNTREND
        assert result.trend_label == "Cooling Off"
        assert [level.price for level in result.levels] == [123.6, 138.2, 150.0, 161.8, 178.6]
        assert result.signal == SignalCategory.CAUTION

    def test_price_at_the_floor_is_unfavorable(self, falling_130):
        assert analyze("tsla", falling_130).signal == SignalCategory.UNFAVORABLE


def test_flat_series_collapses_levels():
    result = analyze("flat", make_flat_bars([25.0] * 60))
    assert result.range == 0.0
    assert {level.price for level in result.levels} == {25.0}
    # Same-day extremes classify as a downtrend; price sits on the shallow level
    assert result.trend == TrendDirection.DOWNTREND
    assert result.signal == SignalCategory.UNFAVORABLE


def test_empty_history_raises():
    with pytest.raises(EmptyInputError):
        analyze("aapl", [], 100.0)


def test_result_serializes_to_json(rising_130):
    payload = json.loads(json.dumps(analyze("aapl", rising_130, 180.0).to_dict()))
    assert payload["trend"] == "uptrend"
    assert payload["signal"] == "favorable"
    assert payload["swing_high"]["date"] == rising_130[-1].date.isoformat()
    assert len(payload["levels"]) == 5
    assert [level["is_golden_zone"] for level in payload["levels"]].count(True) == 1


def test_repeated_analysis_is_identical(rising_130):
    assert analyze("aapl", rising_130, 170.0) == analyze("aapl", rising_130, 170.0)
