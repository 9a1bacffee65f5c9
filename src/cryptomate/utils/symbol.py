"""
Symbol normalization for CryptoMate.

Turns free-text user input ("btc", "Bitcoin", "ethusdt") into the Binance
USDT pair the market data provider expects.
"""
import re
from typing import Optional

QUOTE_ASSET = "USDT"

COMMON_SYMBOLS = {
    'btc': 'BTCUSDT',
    'bitcoin': 'BTCUSDT',
    'eth': 'ETHUSDT',
    'ethereum': 'ETHUSDT',
    'bnb': 'BNBUSDT',
    'sol': 'SOLUSDT',
    'solana': 'SOLUSDT',
    'ada': 'ADAUSDT',
    'cardano': 'ADAUSDT',
    'xrp': 'XRPUSDT',
    'ripple': 'XRPUSDT',
    'doge': 'DOGEUSDT',
    'dogecoin': 'DOGEUSDT',
    'avax': 'AVAXUSDT',
    'avalanche': 'AVAXUSDT',
    'dot': 'DOTUSDT',
    'polkadot': 'DOTUSDT',
    'matic': 'MATICUSDT',
    'polygon': 'MATICUSDT',
    'link': 'LINKUSDT',
    'chainlink': 'LINKUSDT',
    'atom': 'ATOMUSDT',
    'cosmos': 'ATOMUSDT',
    'ltc': 'LTCUSDT',
    'litecoin': 'LTCUSDT',
    'uni': 'UNIUSDT',
    'uniswap': 'UNIUSDT',
    'algo': 'ALGOUSDT',
    'algorand': 'ALGOUSDT',
    'near': 'NEARUSDT',
    'ftm': 'FTMUSDT',
    'fantom': 'FTMUSDT',
    'sand': 'SANDUSDT',
    'sandbox': 'SANDUSDT',
    'mana': 'MANAUSDT',
    'decentraland': 'MANAUSDT',
    'axs': 'AXSUSDT',
    'axie': 'AXSUSDT',
    'gala': 'GALAUSDT',
    'enj': 'ENJUSDT',
    'enjin': 'ENJUSDT',
}

_MENTION_RE = re.compile(r'<@!?\d+>')
_TICKER_RE = re.compile(r'^(?=.*[A-Z])[A-Z0-9]{2,10}$')


def normalize_symbol(text: str) -> str:
    """
    Normalize user input to a Binance USDT pair.

    Raises:
        ValueError: If the input is empty or whitespace
    """
    if not text or not text.strip():
        raise ValueError("Symbol input is required")

    cleaned = text.strip().upper()
    if cleaned.endswith(QUOTE_ASSET):
        return cleaned

    alias = COMMON_SYMBOLS.get(text.strip().lower())
    if alias:
        return alias

    if QUOTE_ASSET not in cleaned:
        return f"{cleaned}{QUOTE_ASSET}"

    return cleaned


def _looks_like_symbol(token: str) -> bool:
    if token.lower() in COMMON_SYMBOLS:
        return True
    if token.upper().endswith(QUOTE_ASSET) and len(token) > len(QUOTE_ASSET):
        return True
    # Only words typed in capitals count as bare tickers ("PEPE", not "hello")
    return bool(_TICKER_RE.match(token))


def parse_symbol_from_message(content: str) -> Optional[str]:
    """
    Pick the first symbol-like word out of a chat message.

    Discord user mentions are stripped first. Returns None when no word looks
    like a symbol.
    """
    cleaned = _MENTION_RE.sub('', content or '')

    for token in cleaned.split():
        if _looks_like_symbol(token):
            return normalize_symbol(token)

    return None
