"""Technical indicators for CryptoMate."""
from cryptomate.indicators.ema import compute_ema, dual_ema_trend, latest_ema
from cryptomate.indicators.rsi import compute_rsi, interpret_rsi, latest_rsi

__all__ = [
    'compute_ema',
    'latest_ema',
    'dual_ema_trend',
    'compute_rsi',
    'latest_rsi',
    'interpret_rsi',
]
