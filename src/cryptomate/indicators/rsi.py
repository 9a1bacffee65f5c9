"""cryptomate.indicators.rsi

Relative Strength Index with Wilder's smoothing.
"""

from typing import List, Optional, Sequence

from cryptomate.config import (
    DEFAULT_OVERBOUGHT_THRESHOLD,
    DEFAULT_OVERSOLD_THRESHOLD,
    DEFAULT_RSI_PERIOD,
)
from cryptomate.models import Momentum, RSISignal


def compute_rsi(values: Sequence[float], period: int = DEFAULT_RSI_PERIOD) -> List[float]:
    """
    Compute the RSI series for ``values``.

    Average gain and loss are seeded with the mean of the first ``period``
    changes; each later change is folded in with Wilder's smoothing and
    produces one RSI value. The seed itself is not emitted.

    Raises:
        ValueError: If period is not positive
    """
    if period <= 0:
        raise ValueError(f"RSI period must be positive, got {period}")
    if len(values) < period + 1:
        return []

    gains: List[float] = []
    losses: List[float] = []
    for previous, current in zip(values, values[1:]):
        change = current - previous
        gains.append(max(change, 0.0))
        losses.append(max(-change, 0.0))

    avg_gain = sum(gains[:period]) / period
    avg_loss = sum(losses[:period]) / period

    rsi: List[float] = []
    for gain, loss in zip(gains[period:], losses[period:]):
        avg_gain = (avg_gain * (period - 1) + gain) / period
        avg_loss = (avg_loss * (period - 1) + loss) / period

        if avg_loss == 0:
            rsi.append(100.0)
        else:
            rs = avg_gain / avg_loss
            rsi.append(100 - 100 / (1 + rs))

    return rsi


def latest_rsi(values: Sequence[float], period: int = DEFAULT_RSI_PERIOD) -> Optional[float]:
    """Return the most recent RSI value, or None when history is too short."""
    series = compute_rsi(values, period)
    return series[-1] if series else None


def interpret_rsi(
    value: Optional[float],
    oversold: float = DEFAULT_OVERSOLD_THRESHOLD,
    overbought: float = DEFAULT_OVERBOUGHT_THRESHOLD,
) -> RSISignal:
    """
    Read an RSI value as oversold / overbought / neutral.

    The thresholds themselves count as neutral. A missing value is neutral
    and stays None so callers can tell "no data" apart.
    """
    if value is None:
        return RSISignal(value=None, signal=Momentum.NEUTRAL)

    if value < oversold:
        signal = Momentum.OVERSOLD
    elif value > overbought:
        signal = Momentum.OVERBOUGHT
    else:
        signal = Momentum.NEUTRAL

    return RSISignal(value=value, signal=signal)
