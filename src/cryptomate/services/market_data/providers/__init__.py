"""cryptomate.services.market_data.providers

Market data provider layer.

The bot does not ship an HTTP client; the process entry point constructs a
concrete provider (usually wrapped in CachedMarketDataProvider) and registers
it once:

    from cryptomate.services.market_data.providers import set_provider

    set_provider(CachedMarketDataProvider(binance_provider, cache))
    data = await get_provider().get_market_data("BTCUSDT", "1h")

Concrete providers talking to Binance are expected to turn raw payloads into
engine types with ``parse_kline`` and ``TickerStats.from_binance``, so string
parsing never reaches the analysis code.
"""

import logging
from typing import Optional

from cryptomate.services.market_data.providers.base import (
    MarketData,
    MarketDataError,
    MarketDataProviderBase,
    TickerStats,
    parse_kline,
)
from cryptomate.services.market_data.providers.cached import CachedMarketDataProvider

logger = logging.getLogger(__name__)

# Registered provider instance (single provider per process)
_provider_instance: Optional[MarketDataProviderBase] = None


def set_provider(provider: MarketDataProviderBase) -> None:
    """Register the provider used by get_provider()."""
    global _provider_instance
    _provider_instance = provider
    logger.info("Using market data provider: %s", provider.name)


def get_provider() -> MarketDataProviderBase:
    """Return the registered provider.

    Raises:
        RuntimeError: If no provider has been registered.
    """
    if _provider_instance is None:
        raise RuntimeError("No market data provider configured; call set_provider() first")
    return _provider_instance


def reset_provider() -> None:
    """Reset the registered provider instance (primarily for tests)."""
    global _provider_instance
    _provider_instance = None


__all__ = [
    "CachedMarketDataProvider",
    "MarketData",
    "MarketDataError",
    "MarketDataProviderBase",
    "TickerStats",
    "parse_kline",
    "get_provider",
    "set_provider",
    "reset_provider",
]
