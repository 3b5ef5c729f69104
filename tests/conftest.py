"""Shared fixtures and series builders for the Golden Zone tests."""

import random
from datetime import date, timedelta

import pytest

from goldenzone.strategy.core.models import PriceBar

START_DATE = date(2021, 1, 4)


def make_flat_bars(closes, start=START_DATE):
    """One bar per close with open == high == low == close."""
    return [
        PriceBar(
            date=start + timedelta(days=i),
            open=close,
            high=close,
            low=close,
            close=close,
            volume=1_000.0,
        )
        for i, close in enumerate(closes)
    ]


def linear_closes(first, last, count):
    """`count` evenly spaced closes from `first` to `last` inclusive."""
    step = (last - first) / (count - 1)
    closes = [first + step * i for i in range(count)]
    closes[-1] = last
    return closes


def make_random_walk(count, seed=7, start_price=100.0):
    """Random-walk OHLC bars with a realistic intraday spread."""
    rng = random.Random(seed)
    bars = []
    close = start_price
    for i in range(count):
        open_price = close
        close = max(1.0, close * (1 + rng.gauss(0, 0.02)))
        high = max(open_price, close) * (1 + abs(rng.gauss(0, 0.005)))
        low = min(open_price, close) * (1 - abs(rng.gauss(0, 0.005)))
        bars.append(
            PriceBar(
                date=START_DATE + timedelta(days=i),
                open=round(open_price, 2),
                high=round(high, 2) + 0.01,
                low=round(low, 2) - 0.01,
                close=round(close, 2),
                volume=float(rng.randint(1_000, 10_000)),
            )
        )
    return bars


@pytest.fixture
def rising_130():
    """130 bars rising from 100.00 to 200.00."""
    return make_flat_bars(linear_closes(100.0, 200.0, 130))


@pytest.fixture
def falling_130():
    """130 bars falling from 200.00 to 100.00."""
    return make_flat_bars(linear_closes(200.0, 100.0, 130))


@pytest.fixture
def random_walk():
    return make_random_walk(700)
