"""
Ingestion Service - Fetches daily price history from Financial Modeling Prep

Histories are cached in the local database so that a ticker is only fetched
once. Failures never raise out of get_historical_prices(); they come back as a
user-facing message instead.
"""
import asyncio
from datetime import date, datetime, timedelta
from typing import Callable, Dict, List, Optional, Tuple

import aiohttp
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from goldenzone.shared.config import FMP_API_KEY, FMP_API_URL, HISTORY_YEARS, HTTP_TIMEOUT
from goldenzone.shared.database import SessionLocal
from goldenzone.shared.logger import setup_logger
from goldenzone.shared.storage import StorageService
from goldenzone.strategy.core.models import PriceBar

logger = setup_logger(__name__)

MISSING_KEY_MESSAGE = (
    "We're missing the API key. Set FMP_API_KEY in your environment and try again."
)
CONNECTION_MESSAGE = (
    "Something went wrong fetching the data. Check your internet connection "
    "and give it another shot."
)


def provider_error_message(status: int) -> str:
    return (
        f"Couldn't reach the data provider (status {status}). Try again in a "
        f"moment, sometimes the server just needs a breather."
    )


def unknown_ticker_message(symbol: str) -> str:
    return (
        f'No price history found for "{symbol.upper()}". Double-check the '
        f"ticker, maybe it's spelled differently than you think."
    )


def parse_historical(entries: List[Dict]) -> List[PriceBar]:
    """
    Parse FMP end-of-day rows into PriceBars, oldest first.

    FMP returns newest first. Rows with missing or inconsistent prices and
    repeated dates are skipped.
    """
    bars: Dict[date, PriceBar] = {}
    for entry in entries:
        try:
            bar_date = datetime.strptime(str(entry["date"])[:10], "%Y-%m-%d").date()
            open_price = float(entry["open"])
            high_price = float(entry["high"])
            low_price = float(entry["low"])
            close_price = float(entry["close"])
            volume = float(entry.get("volume") or 0.0)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping malformed price row {entry!r}: {e}")
            continue

        if min(open_price, high_price, low_price, close_price) <= 0:
            logger.warning(
                f"Invalid OHLC prices on {bar_date}: o={open_price}, h={high_price}, "
                f"l={low_price}, c={close_price}"
            )
            continue

        if not (low_price <= min(open_price, close_price) and max(open_price, close_price) <= high_price):
            logger.warning(f"Inconsistent high/low on {bar_date}: high={high_price}, low={low_price}")
            continue

        if bar_date in bars:
            logger.debug(f"Duplicate row for {bar_date}, keeping the first")
            continue

        bars[bar_date] = PriceBar(
            date=bar_date,
            open=open_price,
            high=high_price,
            low=low_price,
            close=close_price,
            volume=volume,
        )

    return [bars[key] for key in sorted(bars)]


class FMPIngestionService:
    """Service for fetching daily price history from the FMP stable API"""

    def __init__(
        self,
        api_key: str = FMP_API_KEY,
        base_url: str = FMP_API_URL,
        session_factory: Callable[[], Session] = SessionLocal,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.session_factory = session_factory
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        self.session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=HTTP_TIMEOUT))
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.session:
            await self.session.close()

    async def fetch_historical(
        self,
        symbol: str,
        date_from: date,
        date_to: date
    ) -> Tuple[Optional[List[Dict]], Optional[str]]:
        """
        Fetch raw end-of-day rows for a symbol.

        Returns:
            (rows, None) on success, (None, message) on failure
        """
        url = f"{self.base_url}/historical-price-eod/full"
        params = {
            "symbol": symbol.upper(),
            "from": date_from.isoformat(),
            "to": date_to.isoformat(),
            "apikey": self.api_key,
        }
        try:
            async with self.session.get(url, params=params) as response:
                if response.status != 200:
                    logger.error(f"Failed to fetch history for {symbol}: {response.status}")
                    return None, provider_error_message(response.status)
                data = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Error fetching history for {symbol}: {e}")
            return None, CONNECTION_MESSAGE

        if not isinstance(data, list) or not data:
            logger.warning(f"No history returned for {symbol}")
            return None, unknown_ticker_message(symbol)

        logger.info(f"Fetched {len(data)} rows for {symbol}")
        return data, None

    async def get_historical_prices(
        self,
        symbol: str,
        refresh: bool = False
    ) -> Tuple[Optional[List[PriceBar]], Optional[str]]:
        """
        Get roughly HISTORY_YEARS of daily bars for a symbol.

        The cache is checked first unless refresh is set; fetched histories
        replace the cached one.

        Returns:
            (bars, None) on success, (None, message) on failure
        """
        symbol = symbol.upper()

        if not refresh:
            cached = self._read_cache(symbol)
            if cached:
                logger.info(f"Found {len(cached)} cached bars for {symbol}")
                return cached, None

        if not self.api_key:
            logger.error("FMP_API_KEY is not set")
            return None, MISSING_KEY_MESSAGE

        logger.info(f"Fetching {HISTORY_YEARS} years of history for {symbol}")
        date_to = date.today()
        date_from = date_to - timedelta(days=365 * HISTORY_YEARS)

        rows, error = await self.fetch_historical(symbol, date_from, date_to)
        if error:
            return None, error

        bars = parse_historical(rows)
        if not bars:
            return None, unknown_ticker_message(symbol)

        self._write_cache(symbol, bars, replace=refresh)
        return bars, None

    def _read_cache(self, symbol: str) -> List[PriceBar]:
        try:
            with StorageService(self.session_factory) as storage:
                return storage.get_price_history(symbol)
        except SQLAlchemyError as e:
            logger.warning(f"Price cache unavailable for {symbol}: {e}")
            return []

    def _write_cache(self, symbol: str, bars: List[PriceBar], replace: bool = False) -> None:
        # A failed cache write still leaves the caller with fresh data
        try:
            with StorageService(self.session_factory) as storage:
                if replace:
                    storage.replace_price_history(symbol, bars)
                else:
                    storage.save_price_history(symbol, bars)
        except SQLAlchemyError as e:
            logger.error(f"Could not cache price history for {symbol}: {e}")
