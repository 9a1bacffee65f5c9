"""
Support and resistance level detection.

Levels come from two sources:
- swing highs/lows in the recent candle window, merged into clusters and
  ranked by how many swings landed in each cluster;
- classic floor-trader pivot points from the last completed candle, used to
  backfill a side that has too few clustered levels.

Everything here is pure computation over in-memory candles.
"""
from typing import List, Sequence

from cryptomate.config import (
    SR_CLUSTER_THRESHOLD,
    SR_MAX_LEVELS,
    SR_MIN_CANDLES,
    SR_WINDOW,
    SWING_LOOKBACK,
)
from cryptomate.models import Candle, PivotPoints, SupportResistance, SwingPoints


def compute_pivot_points(high: float, low: float, close: float) -> PivotPoints:
    """
    Classic pivot levels from one candle.

    Pass the last *completed* candle; the in-progress one gives meaningless
    levels.
    """
    pp = (high + low + close) / 3
    return PivotPoints(
        pp=pp,
        r1=2 * pp - low,
        r2=pp + (high - low),
        s1=2 * pp - high,
        s2=pp - (high - low),
    )


def find_swing_points(candles: Sequence[Candle], lookback: int = SWING_LOOKBACK) -> SwingPoints:
    """
    Find fractal highs and lows.

    A candle is a swing high when its high is strictly above every other high
    within ``lookback`` candles on either side (a tie disqualifies it), and a
    swing low by the mirrored rule. Candles closer than ``lookback`` to either
    end are never considered.

    Args:
        candles: Candle window, oldest first
        lookback: Neighbours checked on each side (must be >= 1)

    Returns:
        SwingPoints with prices in scan order
    """
    if lookback < 1:
        raise ValueError(f"Swing lookback must be at least 1, got {lookback}")

    swings = SwingPoints()

    for i in range(lookback, len(candles) - lookback):
        current_high = candles[i].high
        current_low = candles[i].low
        neighbours = [
            candles[j] for j in range(i - lookback, i + lookback + 1) if j != i
        ]

        if all(c.high < current_high for c in neighbours):
            swings.highs.append(current_high)
        if all(c.low > current_low for c in neighbours):
            swings.lows.append(current_low)

    return swings


def cluster_levels(prices: Sequence[float], threshold: float = 0.005) -> List[float]:
    """
    Merge nearby prices into representative levels.

    Prices are walked in ascending order. A price joins the open cluster when
    its relative gap to the cluster's most recently added member is within
    ``threshold``; otherwise it starts a new cluster. Each cluster collapses
    to its mean.

    Returns:
        Cluster means, largest cluster first. Equal-sized clusters keep their
        ascending-price order.
    """
    if not prices:
        return []

    ordered = sorted(prices)
    clusters: List[List[float]] = []
    current = [ordered[0]]

    for price in ordered[1:]:
        last = current[-1]
        # Same as the relative gap for positive prices; a zero price joins only an equal one
        if price - last <= threshold * last:
            current.append(price)
        else:
            clusters.append(current)
            current = [price]
    clusters.append(current)

    clusters.sort(key=len, reverse=True)
    return [sum(cluster) / len(cluster) for cluster in clusters]


def compute_support_resistance(
    candles: Sequence[Candle],
    max_levels: int = SR_MAX_LEVELS,
) -> SupportResistance:
    """
    Compute up to ``max_levels`` support and resistance levels.

    Clustered swing levels are filtered to the correct side of the current
    close and truncated in significance order. A side left with room then
    receives the pivot S1/R1 when it lies on that side. Fewer than 50 candles
    yields an empty result with no pivot points.
    """
    if max_levels < 1:
        raise ValueError(f"max_levels must be at least 1, got {max_levels}")

    if len(candles) < SR_MIN_CANDLES:
        return SupportResistance()

    last_completed = candles[-2]
    pivot_points = compute_pivot_points(
        last_completed.high, last_completed.low, last_completed.close
    )

    swings = find_swing_points(candles[-SR_WINDOW:])
    resistance_levels = cluster_levels(swings.highs, SR_CLUSTER_THRESHOLD)
    support_levels = cluster_levels(swings.lows, SR_CLUSTER_THRESHOLD)

    current_price = candles[-1].close

    support = [level for level in support_levels if level < current_price][:max_levels]
    resistance = [level for level in resistance_levels if level > current_price][:max_levels]

    if len(support) < max_levels and pivot_points.s1 < current_price:
        support.append(pivot_points.s1)
    if len(resistance) < max_levels and pivot_points.r1 > current_price:
        resistance.append(pivot_points.r1)

    support.sort(reverse=True)
    resistance.sort()

    return SupportResistance(
        support=support,
        resistance=resistance,
        pivot_points=pivot_points,
    )
