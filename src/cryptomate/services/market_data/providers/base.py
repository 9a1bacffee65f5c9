"""
Market Data Provider Base Interface.

Defines the common interface that all market data providers must implement,
plus the parsing helpers that turn Binance REST payloads (numeric fields sent
as strings) into typed values. The analysis engine only ever sees the parsed
types.
"""
import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Sequence

from cryptomate.config import KLINE_LIMIT
from cryptomate.models import Candle


class MarketDataError(Exception):
    """Raised when market data for a symbol cannot be fetched or parsed."""


def parse_kline(raw: Sequence[Any]) -> Candle:
    """
    Parse one Binance kline row.

    Binance sends ``[openTime, "open", "high", "low", "close", "volume",
    closeTime, ...]``; trailing fields are ignored.

    Raises:
        MarketDataError: If the row is too short or a field is not numeric
    """
    if len(raw) < 7:
        raise MarketDataError(f"Kline row has {len(raw)} fields, expected at least 7")

    try:
        return Candle(
            open_time=int(raw[0]),
            open=float(raw[1]),
            high=float(raw[2]),
            low=float(raw[3]),
            close=float(raw[4]),
            volume=float(raw[5]),
            close_time=int(raw[6]),
        )
    except (TypeError, ValueError) as e:
        raise MarketDataError(f"Malformed kline row: {e}") from e


@dataclass
class TickerStats:
    """24-hour rolling statistics for a symbol."""
    symbol: str
    last_price: float
    price_change: float
    price_change_percent: float
    volume: float
    high_price: float
    low_price: float

    @classmethod
    def from_binance(cls, payload: Mapping[str, Any]) -> "TickerStats":
        """Create TickerStats from a Binance ``/api/v3/ticker/24hr`` payload."""
        try:
            return cls(
                symbol=str(payload['symbol']),
                last_price=float(payload['lastPrice']),
                price_change=float(payload['priceChange']),
                price_change_percent=float(payload['priceChangePercent']),
                volume=float(payload['volume']),
                high_price=float(payload['highPrice']),
                low_price=float(payload['lowPrice']),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise MarketDataError(f"Malformed ticker payload: {e}") from e


@dataclass
class MarketData:
    """
    Unified market snapshot from any provider.

    ``candles`` is ordered oldest first; the last candle may still be forming.
    """
    symbol: str
    price: float
    price_change_24h: float
    price_change_percent_24h: float
    volume_24h: float
    high_24h: float
    low_24h: float
    candles: List[Candle] = field(default_factory=list)

    @classmethod
    def from_parts(cls, ticker: TickerStats, candles: List[Candle]) -> "MarketData":
        return cls(
            symbol=ticker.symbol,
            price=ticker.last_price,
            price_change_24h=ticker.price_change,
            price_change_percent_24h=ticker.price_change_percent,
            volume_24h=ticker.volume,
            high_24h=ticker.high_price,
            low_24h=ticker.low_price,
            candles=candles,
        )


class MarketDataProviderBase(ABC):
    """
    Abstract base class for market data providers.

    Providers own transport, retries and any caching; they raise
    MarketDataError when a symbol cannot be served.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this provider (for logging/display)."""
        pass

    @abstractmethod
    async def get_ticker_24hr(self, symbol: str) -> TickerStats:
        """
        Fetch 24-hour statistics for a symbol.

        Args:
            symbol: Trading pair (e.g., "BTCUSDT")
        """
        pass

    @abstractmethod
    async def get_klines(self, symbol: str, interval: str, limit: int = KLINE_LIMIT) -> List[Candle]:
        """
        Fetch candles for a symbol.

        Args:
            symbol: Trading pair (e.g., "BTCUSDT")
            interval: Candle timeframe (e.g., "1h")
            limit: Number of candles, most recent last

        Returns:
            Candles ordered oldest first
        """
        pass

    async def get_market_data(self, symbol: str, timeframe: str) -> MarketData:
        """Fetch ticker stats and candles concurrently and combine them."""
        ticker, candles = await asyncio.gather(
            self.get_ticker_24hr(symbol),
            self.get_klines(symbol, timeframe, KLINE_LIMIT),
        )
        return MarketData.from_parts(ticker, candles)

    async def symbol_exists(self, symbol: str) -> bool:
        try:
            await self.get_ticker_24hr(symbol)
        except MarketDataError:
            return False
        return True
