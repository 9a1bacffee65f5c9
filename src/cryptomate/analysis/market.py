"""
Per-request technical snapshot: trend, momentum and key levels from one
candle series.
"""
from dataclasses import dataclass
from typing import Sequence

from cryptomate.analysis.support_resistance import compute_support_resistance
from cryptomate.config import DEFAULT_RSI_PERIOD, SR_MAX_LEVELS
from cryptomate.indicators.ema import dual_ema_trend
from cryptomate.indicators.rsi import interpret_rsi, latest_rsi
from cryptomate.models import Candle, EMATrend, RSISignal, SupportResistance


@dataclass
class TechnicalSnapshot:
    """Engine output for one symbol/timeframe."""
    ema: EMATrend
    rsi: RSISignal
    levels: SupportResistance


def analyze_candles(
    candles: Sequence[Candle],
    rsi_period: int = DEFAULT_RSI_PERIOD,
    max_levels: int = SR_MAX_LEVELS,
) -> TechnicalSnapshot:
    """Run every indicator over ``candles`` (oldest first)."""
    closes = [candle.close for candle in candles]
    return TechnicalSnapshot(
        ema=dual_ema_trend(closes),
        rsi=interpret_rsi(latest_rsi(closes, rsi_period)),
        levels=compute_support_resistance(candles, max_levels),
    )
