"""CryptoMate market bot package.

A Discord bot that reports cryptocurrency market snapshots: dual-EMA trend,
RSI momentum and support/resistance levels computed from Binance candles.

The analysis engine (``cryptomate.indicators`` and ``cryptomate.analysis``)
is pure computation; network access lives behind the provider interface in
``cryptomate.services.market_data``.
"""

__version__ = "1.0.0"
