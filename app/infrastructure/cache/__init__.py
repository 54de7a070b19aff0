"""Cache: Redis service and cache key utilities.

Used by the app version repository. CacheService uses app.core.config;
key format is in keys.py (DRY).
"""

from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.keys import app_versions_key, is_cacheable
from app.infrastructure.cache.redis_cache import CacheService

__all__ = [
    "CacheProtocol",
    "CacheService",
    "app_versions_key",
    "is_cacheable",
]
