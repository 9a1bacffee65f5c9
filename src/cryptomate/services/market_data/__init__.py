"""Market data services for CryptoMate."""

from cryptomate.services.market_data.analyzer import MarketAnalysis, MarketAnalyzer
from cryptomate.services.market_data.providers import (
    CachedMarketDataProvider,
    MarketData,
    MarketDataError,
    MarketDataProviderBase,
    get_provider,
    set_provider,
)

__all__ = [
    "MarketAnalysis",
    "MarketAnalyzer",
    "CachedMarketDataProvider",
    "MarketData",
    "MarketDataError",
    "MarketDataProviderBase",
    "get_provider",
    "set_provider",
]
