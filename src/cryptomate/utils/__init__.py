"""Utility modules for CryptoMate."""
from cryptomate.utils.symbol import normalize_symbol, parse_symbol_from_message

__all__ = ['normalize_symbol', 'parse_symbol_from_message']
