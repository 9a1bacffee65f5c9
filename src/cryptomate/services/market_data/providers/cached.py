"""
Caching decorator for market data providers.

Wraps any MarketDataProviderBase and serves repeated requests for the same
symbol/timeframe from a TTLCache until the entry expires.
"""
import logging
from typing import List

from cryptomate.config import KLINE_LIMIT
from cryptomate.models import Candle
from cryptomate.services.cache import TTLCache
from cryptomate.services.market_data.providers.base import MarketDataProviderBase, TickerStats

logger = logging.getLogger(__name__)


class CachedMarketDataProvider(MarketDataProviderBase):
    """Serve ticker stats and candles from a TTL cache in front of ``inner``."""

    def __init__(self, inner: MarketDataProviderBase, cache: TTLCache):
        self.inner = inner
        self.cache = cache

    @property
    def name(self) -> str:
        return f"{self.inner.name} (cached)"

    async def get_ticker_24hr(self, symbol: str) -> TickerStats:
        key = f"ticker:{symbol}"
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        ticker = await self.inner.get_ticker_24hr(symbol)
        self.cache.set(key, ticker)
        return ticker

    async def get_klines(self, symbol: str, interval: str, limit: int = KLINE_LIMIT) -> List[Candle]:
        key = f"klines:{symbol}:{interval}:{limit}"
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        candles = await self.inner.get_klines(symbol, interval, limit)
        self.cache.set(key, candles)
        logger.debug("Cached %d candles for %s %s", len(candles), symbol, interval)
        return candles
