"""cryptomate.indicators.ema

Exponential moving averages and the dual-EMA trend reading.

The EMA series keeps the input's length: the first ``period - 1`` slots hold
``None`` and every later slot holds a float.
"""

from typing import List, Optional, Sequence

from cryptomate.config import EMA_FAST_PERIOD, EMA_SLOW_PERIOD, TREND_THRESHOLD
from cryptomate.models import EMATrend, Trend


def compute_ema(values: Sequence[float], period: int) -> List[Optional[float]]:
    """
    Compute the EMA of ``values``, seeded with the simple mean of the first
    ``period`` values.

    Args:
        values: Prices, oldest first
        period: Smoothing period (must be positive)

    Returns:
        List aligned with ``values``; empty when there are fewer values than
        ``period``.

    Raises:
        ValueError: If period is not positive
    """
    if period <= 0:
        raise ValueError(f"EMA period must be positive, got {period}")
    if len(values) < period:
        return []

    multiplier = 2 / (period + 1)
    ema: List[Optional[float]] = [None] * (period - 1)

    previous = sum(values[:period]) / period
    ema.append(previous)

    for value in values[period:]:
        previous = (value - previous) * multiplier + previous
        ema.append(previous)

    return ema


def latest_ema(values: Sequence[float], period: int) -> Optional[float]:
    """Return the most recent EMA value, or None if none is defined."""
    series = compute_ema(values, period)
    return series[-1] if series else None


def dual_ema_trend(close_prices: Sequence[float]) -> EMATrend:
    """
    Classify the trend from the gap between EMA20 and EMA50.

    The trend is bullish when EMA20 sits more than 0.1% above EMA50, bearish
    when more than 0.1% below, and neutral otherwise or when either average
    cannot be computed yet.
    """
    ema_fast = latest_ema(close_prices, EMA_FAST_PERIOD)
    ema_slow = latest_ema(close_prices, EMA_SLOW_PERIOD)

    if ema_fast is None or ema_slow is None:
        return EMATrend(ema_fast=None, ema_slow=None, trend=Trend.NEUTRAL)

    trend = Trend.NEUTRAL
    if ema_slow != 0:
        diff = (ema_fast - ema_slow) / ema_slow
        if diff > TREND_THRESHOLD:
            trend = Trend.BULLISH
        elif diff < -TREND_THRESHOLD:
            trend = Trend.BEARISH

    return EMATrend(ema_fast=ema_fast, ema_slow=ema_slow, trend=trend)
