"""Market analysis for CryptoMate."""
from cryptomate.analysis.market import TechnicalSnapshot, analyze_candles
from cryptomate.analysis.support_resistance import (
    cluster_levels,
    compute_pivot_points,
    compute_support_resistance,
    find_swing_points,
)

__all__ = [
    'TechnicalSnapshot',
    'analyze_candles',
    'cluster_levels',
    'compute_pivot_points',
    'compute_support_resistance',
    'find_swing_points',
]
