"""Services package for CryptoMate."""
from cryptomate.services.cache import TTLCache
from cryptomate.services.scheduler import CacheCleanupScheduler

__all__ = ['TTLCache', 'CacheCleanupScheduler']
