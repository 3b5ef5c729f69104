"""
ORM models for the price history cache
"""
from sqlalchemy import Column, Date, Float, Integer, String, UniqueConstraint

from goldenzone.shared.database import Base
from goldenzone.strategy.core.models import PriceBar


class OHLCVCandle(Base):
    """One cached daily bar of a symbol."""
    __tablename__ = "ohlcv_candles"
    __table_args__ = (
        UniqueConstraint("symbol", "date", name="uq_ohlcv_candles_symbol_date"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    symbol = Column(String(32), nullable=False, index=True)
    date = Column(Date, nullable=False)
    open = Column(Float, nullable=False)
    high = Column(Float, nullable=False)
    low = Column(Float, nullable=False)
    close = Column(Float, nullable=False)
    volume = Column(Float, nullable=False, default=0.0)

    @classmethod
    def from_price_bar(cls, symbol: str, bar: PriceBar) -> "OHLCVCandle":
        return cls(
            symbol=symbol,
            date=bar.date,
            open=bar.open,
            high=bar.high,
            low=bar.low,
            close=bar.close,
            volume=bar.volume,
        )

    def to_price_bar(self) -> PriceBar:
        return PriceBar(
            date=self.date,
            open=self.open,
            high=self.high,
            low=self.low,
            close=self.close,
            volume=self.volume,
        )
