"""Infrastructure cache module."""
from .ttl_cache import CacheStats, TTLCache
from .cache_service import CacheService

__all__ = ['TTLCache', 'CacheStats', 'CacheService']
