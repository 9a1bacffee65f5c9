"""Configuration settings for the CryptoMate market bot.

Indicator and level-detection constants live here next to the runtime
settings so the analysis engine and the services agree on one set of numbers.

Runtime paths
-------------
Logging goes to stdout by default. For systemd deployments a log file can be
added via the LOG_PATH environment variable.
"""

import os
from pathlib import Path
from typing import Optional

# =============================================================================
# Environment
# =============================================================================

# Bot token (set via environment variable or .env loader)
DISCORD_TOKEN = os.getenv("DISCORD_TOKEN", "").strip()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()

_log_path = os.getenv("LOG_PATH", "").strip()
LOG_PATH: Optional[Path] = Path(_log_path) if _log_path else None

DEFAULT_TIMEZONE = os.getenv("TIMEZONE", "UTC")

# =============================================================================
# Market data
# =============================================================================

SUPPORTED_TIMEFRAMES = ("1m", "5m", "15m", "30m", "1h", "4h", "1d")
DEFAULT_TIMEFRAME = os.getenv("DEFAULT_TIMEFRAME", "1h")

# Candles requested per snapshot (EMA50 and the S/R window both fit comfortably)
KLINE_LIMIT = 200

# =============================================================================
# Cache
# =============================================================================
CACHE_TTL_SECONDS = int(os.getenv("CACHE_TTL_SECONDS", "60"))
CACHE_CLEANUP_INTERVAL_SECONDS = 60

# =============================================================================
# Indicator defaults
# =============================================================================
EMA_FAST_PERIOD = 20
EMA_SLOW_PERIOD = 50
TREND_THRESHOLD = 0.001  # relative EMA gap

DEFAULT_RSI_PERIOD = 14
DEFAULT_OVERSOLD_THRESHOLD = 30
DEFAULT_OVERBOUGHT_THRESHOLD = 70

# =============================================================================
# Support / resistance
# =============================================================================
SR_MIN_CANDLES = 50
SR_WINDOW = 100  # trailing candles scanned for swing points
SWING_LOOKBACK = 10
SR_CLUSTER_THRESHOLD = 0.01
SR_MAX_LEVELS = 2
