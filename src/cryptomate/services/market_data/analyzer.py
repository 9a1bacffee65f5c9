"""cryptomate.services.market_data.analyzer

Market analyzer: fetches a snapshot through the registered provider and runs
the indicator engine over it.

This is the piece a command or mention handler calls. It owns input
validation (symbol normalization, timeframe) and logging; the engine itself
stays pure.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from cryptomate.analysis.market import TechnicalSnapshot, analyze_candles
from cryptomate.config import (
    DEFAULT_RSI_PERIOD,
    DEFAULT_TIMEFRAME,
    SR_MAX_LEVELS,
    SUPPORTED_TIMEFRAMES,
)
from cryptomate.models import EMATrend, RSISignal, SupportResistance
from cryptomate.services.market_data.providers import MarketDataProviderBase, get_provider
from cryptomate.services.market_data.providers.base import MarketData, MarketDataError
from cryptomate.utils.symbol import normalize_symbol

logger = logging.getLogger(__name__)


@dataclass
class MarketAnalysis:
    """Everything the presentation layer needs for one reply."""

    market_data: MarketData
    snapshot: TechnicalSnapshot
    timeframe: str

    @property
    def symbol(self) -> str:
        return self.market_data.symbol

    @property
    def ema(self) -> EMATrend:
        return self.snapshot.ema

    @property
    def rsi(self) -> RSISignal:
        return self.snapshot.rsi

    @property
    def levels(self) -> SupportResistance:
        return self.snapshot.levels


def validate_timeframe(timeframe: Optional[str]) -> str:
    """Return a supported timeframe, defaulting when none is given.

    Raises:
        ValueError: If the timeframe is not supported
    """
    if not timeframe:
        return DEFAULT_TIMEFRAME
    timeframe = timeframe.strip()
    if timeframe not in SUPPORTED_TIMEFRAMES:
        raise ValueError(
            f"Unsupported timeframe '{timeframe}'. Choose one of: {', '.join(SUPPORTED_TIMEFRAMES)}"
        )
    return timeframe


class MarketAnalyzer:
    """Produce MarketAnalysis results for user-supplied symbols."""

    def __init__(
        self,
        provider: Optional[MarketDataProviderBase] = None,
        rsi_period: int = DEFAULT_RSI_PERIOD,
        max_levels: int = SR_MAX_LEVELS,
    ):
        self._provider = provider
        self.rsi_period = rsi_period
        self.max_levels = max_levels

    @property
    def provider(self) -> MarketDataProviderBase:
        """Lazy-load provider."""
        if self._provider is None:
            self._provider = get_provider()
        return self._provider

    async def analyze(self, symbol_input: str, timeframe: Optional[str] = None) -> MarketAnalysis:
        """Fetch market data for a symbol and compute its technical snapshot.

        Args:
            symbol_input: Free-text symbol (e.g., "btc", "ETHUSDT")
            timeframe: Candle timeframe; DEFAULT_TIMEFRAME when omitted

        Returns:
            MarketAnalysis for the normalized symbol

        Raises:
            ValueError: If the symbol is blank or the timeframe unsupported
            MarketDataError: If the provider cannot serve the symbol
        """
        symbol = normalize_symbol(symbol_input)
        timeframe = validate_timeframe(timeframe)

        logger.info("Analyzing %s on %s using %s", symbol, timeframe, self.provider.name)

        try:
            market_data = await self.provider.get_market_data(symbol, timeframe)
        except MarketDataError as e:
            logger.error("Failed to fetch market data for %s (%s): %s", symbol, timeframe, e)
            raise

        snapshot = analyze_candles(
            market_data.candles,
            rsi_period=self.rsi_period,
            max_levels=self.max_levels,
        )

        if snapshot.levels.pivot_points is None:
            logger.warning(
                "Only %d candles for %s %s; support/resistance skipped",
                len(market_data.candles), symbol, timeframe,
            )

        logger.info(
            "Analysis complete for %s: trend=%s, rsi=%s, %d support / %d resistance levels",
            symbol,
            snapshot.ema.trend.value,
            snapshot.rsi.signal.value,
            len(snapshot.levels.support),
            len(snapshot.levels.resistance),
        )

        return MarketAnalysis(market_data=market_data, snapshot=snapshot, timeframe=timeframe)
