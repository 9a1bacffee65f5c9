"""
Value types shared by the indicator and level-detection engine.

All types are plain dataclasses. Candles are frozen; everything else is
created fresh per request and never mutated after it is returned.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

import pytz


class Trend(Enum):
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class Momentum(Enum):
    OVERSOLD = "oversold"
    OVERBOUGHT = "overbought"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class Candle:
    """One OHLCV bar. Times are epoch milliseconds."""
    open_time: int
    open: float
    high: float
    low: float
    close: float
    volume: float
    close_time: int

    @property
    def open_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.open_time / 1000, tz=pytz.utc)

    @property
    def close_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.close_time / 1000, tz=pytz.utc)


@dataclass
class EMATrend:
    """Latest fast/slow EMA values and the trend they imply."""
    ema_fast: Optional[float]
    ema_slow: Optional[float]
    trend: Trend


@dataclass
class RSISignal:
    """Latest RSI value (None when history is too short) and its reading."""
    value: Optional[float]
    signal: Momentum


@dataclass
class PivotPoints:
    pp: float  # Pivot point
    r1: float
    r2: float
    s1: float
    s2: float


@dataclass
class SwingPoints:
    """Swing highs and lows in scan order (raw candle prices, not indices)."""
    highs: List[float] = field(default_factory=list)
    lows: List[float] = field(default_factory=list)


@dataclass
class SupportResistance:
    """
    Key levels relative to the current close.

    Support is sorted descending and resistance ascending, so the level
    closest to price comes first on both sides.
    """
    support: List[float] = field(default_factory=list)
    resistance: List[float] = field(default_factory=list)
    pivot_points: Optional[PivotPoints] = None
