"""Tests for the FMP ingestion service (HTTP calls are stubbed)."""

import asyncio
from datetime import date
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from goldenzone.ingestion.fmp_service import (
    MISSING_KEY_MESSAGE,
    FMPIngestionService,
    parse_historical,
    provider_error_message,
)
from goldenzone.shared.database import init_db
from goldenzone.shared.storage import StorageService

from tests.conftest import make_flat_bars


def fmp_row(day, close, high=None, low=None, open_price=None, volume=1000):
    return {
        "symbol": "AAPL",
        "date": day,
        "open": close if open_price is None else open_price,
        "high": close + 1 if high is None else high,
        "low": close - 1 if low is None else low,
        "close": close,
        "volume": volume,
    }


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield sessionmaker(bind=engine, autocommit=False, autoflush=False)
    engine.dispose()


class TestParseHistorical:
    def test_reorders_newest_first_rows(self):
        rows = [fmp_row("2024-01-04", 12.0), fmp_row("2024-01-03", 11.0), fmp_row("2024-01-02", 10.0)]
        bars = parse_historical(rows)
        assert [bar.date for bar in bars] == [date(2024, 1, 2), date(2024, 1, 3), date(2024, 1, 4)]
        assert [bar.close for bar in bars] == [10.0, 11.0, 12.0]
        assert bars[0].high == 11.0 and bars[0].low == 9.0

    def test_skips_invalid_rows(self):
        rows = [
            fmp_row("2024-01-05", 10.0),
            fmp_row("2024-01-04", 10.0, high=8.0),
            fmp_row("2024-01-03", -1.0),
            {"date": "2024-01-02", "close": 10.0},
            fmp_row("not-a-date", 10.0),
            fmp_row("2024-01-01", 10.0, open_price=20.0),
        ]
        bars = parse_historical(rows)
        assert [bar.date for bar in bars] == [date(2024, 1, 5)]

    def test_keeps_first_of_duplicate_dates(self):
        bars = parse_historical([fmp_row("2024-01-02", 10.0), fmp_row("2024-01-02", 99.0)])
        assert len(bars) == 1
        assert bars[0].close == 10.0

    def test_missing_volume_defaults_to_zero(self):
        row = fmp_row("2024-01-02", 10.0)
        row["volume"] = None
        assert parse_historical([row])[0].volume == 0.0


class TestGetHistoricalPrices:
    def test_cached_history_skips_the_provider(self, session_factory):
        cached = make_flat_bars([10.0, 11.0, 12.0])
        with StorageService(session_factory) as storage:
            storage.save_price_history("AAPL", cached)

        service = FMPIngestionService(api_key="key", session_factory=session_factory)
        with patch.object(service, "fetch_historical", new=AsyncMock()) as fetch:
            bars, error = asyncio.run(service.get_historical_prices("aapl"))

        fetch.assert_not_called()
        assert error is None
        assert bars == cached

    def test_missing_api_key(self, session_factory):
        service = FMPIngestionService(api_key="", session_factory=session_factory)
        bars, error = asyncio.run(service.get_historical_prices("aapl"))
        assert bars is None
        assert error == MISSING_KEY_MESSAGE

    def test_fetched_history_is_parsed_and_cached(self, session_factory):
        rows = [fmp_row("2024-01-03", 11.0), fmp_row("2024-01-02", 10.0)]
        service = FMPIngestionService(api_key="key", session_factory=session_factory)
        with patch.object(service, "fetch_historical", new=AsyncMock(return_value=(rows, None))):
            bars, error = asyncio.run(service.get_historical_prices("aapl"))

        assert error is None
        assert [bar.close for bar in bars] == [10.0, 11.0]
        with StorageService(session_factory) as storage:
            assert storage.get_price_history("AAPL") == bars

    def test_refresh_replaces_the_cache(self, session_factory):
        with StorageService(session_factory) as storage:
            storage.save_price_history("AAPL", make_flat_bars([1.0, 2.0, 3.0, 4.0]))

        rows = [fmp_row("2024-01-02", 10.0)]
        service = FMPIngestionService(api_key="key", session_factory=session_factory)
        with patch.object(service, "fetch_historical", new=AsyncMock(return_value=(rows, None))) as fetch:
            bars, error = asyncio.run(service.get_historical_prices("aapl", refresh=True))

        fetch.assert_awaited_once()
        assert error is None
        with StorageService(session_factory) as storage:
            assert storage.get_price_history("AAPL") == bars

    def test_provider_error_is_returned(self, session_factory):
        service = FMPIngestionService(api_key="key", session_factory=session_factory)
        failure = (None, provider_error_message(429))
        with patch.object(service, "fetch_historical", new=AsyncMock(return_value=failure)):
            bars, error = asyncio.run(service.get_historical_prices("aapl"))

        assert bars is None
        assert "status 429" in error

    def test_only_invalid_rows_means_unknown_ticker(self, session_factory):
        rows = [fmp_row("2024-01-02", -5.0)]
        service = FMPIngestionService(api_key="key", session_factory=session_factory)
        with patch.object(service, "fetch_historical", new=AsyncMock(return_value=(rows, None))):
            bars, error = asyncio.run(service.get_historical_prices("zzzz"))

        assert bars is None
        assert '"ZZZZ"' in error
