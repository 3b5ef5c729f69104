"""
Storage - price history cache access layer
"""
from typing import Callable, List, Optional, Sequence

from sqlalchemy.orm import Session

from goldenzone.shared.database import SessionLocal
from goldenzone.shared.logger import setup_logger
from goldenzone.shared.models import OHLCVCandle
from goldenzone.strategy.core.models import PriceBar

logger = setup_logger(__name__)


class StorageService:
    """Service for price cache operations"""

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal):
        self.session_factory = session_factory
        self.db: Optional[Session] = None

    def __enter__(self):
        self.db = self.session_factory()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.db:
            self.db.close()

    def get_price_history(self, symbol: str) -> List[PriceBar]:
        """Get cached bars for a symbol, oldest first"""
        candles = (
            self.db.query(OHLCVCandle)
            .filter(OHLCVCandle.symbol == symbol.upper())
            .order_by(OHLCVCandle.date)
            .all()
        )
        return [candle.to_price_bar() for candle in candles]

    def save_price_history(self, symbol: str, bars: Sequence[PriceBar]) -> int:
        """
        Cache bars for a symbol.

        Dates already stored for the symbol are left untouched.

        Returns:
            Number of bars inserted
        """
        symbol = symbol.upper()
        try:
            existing = {
                row[0]
                for row in self.db.query(OHLCVCandle.date).filter(OHLCVCandle.symbol == symbol)
            }
            new_candles = [
                OHLCVCandle.from_price_bar(symbol, bar)
                for bar in bars
                if bar.date not in existing
            ]
            self.db.add_all(new_candles)
            self.db.commit()
            logger.info(f"Saved {len(new_candles)} bars for {symbol}")
            return len(new_candles)
        except Exception as e:
            logger.error(f"Error saving price history for {symbol}: {e}")
            self.db.rollback()
            raise

    def replace_price_history(self, symbol: str, bars: Sequence[PriceBar]) -> int:
        """
        Swap the cached bars of a symbol for a new set in one transaction.

        The previous bars survive when the new set cannot be stored.

        Returns:
            Number of bars stored
        """
        symbol = symbol.upper()
        try:
            deleted = (
                self.db.query(OHLCVCandle)
                .filter(OHLCVCandle.symbol == symbol)
                .delete(synchronize_session=False)
            )
            seen = set()
            new_candles = []
            for bar in bars:
                if bar.date in seen:
                    continue
                seen.add(bar.date)
                new_candles.append(OHLCVCandle.from_price_bar(symbol, bar))
            self.db.add_all(new_candles)
            self.db.commit()
            logger.info(f"Replaced {deleted} cached bars for {symbol} with {len(new_candles)}")
            return len(new_candles)
        except Exception as e:
            logger.error(f"Error replacing price history for {symbol}: {e}")
            self.db.rollback()
            raise
