"""Redis-based cache service for read-heavy lookups.

Provides async Redis caching with TTL support. Used for app version
listings, which change only when a new version first runs. Key format
lives in app.infrastructure.cache.keys (DRY).
"""

from __future__ import annotations

import json
import logging
from typing import Any

import redis.asyncio as redis

from app.core.config import get_settings

logger = logging.getLogger(__name__)


class CacheService:
    """Async Redis cache service with TTL support.

    Uses app.core.config for connection settings. Call connect() at
    startup and disconnect() at shutdown. Every operation degrades to a
    miss (or a no-op) when Redis is unreachable.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize cache service.

        Args:
            redis_client: Optional Redis client for testing or DI.
        """
        self.redis = redis_client
        self.settings = get_settings()
        self._connected = redis_client is not None

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup."""
        if self.redis is None:
            try:
                self.redis = redis.Redis(
                    host=self.settings.redis_host,
                    port=self.settings.redis_port,
                    db=self.settings.redis_db,
                    password=self.settings.redis_password.get_secret_value()
                    if self.settings.redis_password
                    else None,
                    decode_responses=True,
                    socket_connect_timeout=5,
                    socket_keepalive=True,
                )
                await self.redis.ping()
                self._connected = True
                logger.info(
                    "Redis cache connected: %s:%s",
                    self.settings.redis_host,
                    self.settings.redis_port,
                )
            except (redis.ConnectionError, redis.TimeoutError) as e:
                logger.warning(
                    "Redis connection failed: %s. Cache disabled.",
                    e,
                )
                self._connected = False
                self.redis = None

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis cache disconnected")

    async def _reconnect(self) -> bool:
        """Attempt to reconnect after disconnect. Returns True if reconnected."""
        if self.redis is None:
            return False
        try:
            await self.redis.aclose()
        except redis.RedisError:
            logger.debug("Error closing stale Redis connection", exc_info=True)
        self.redis = None
        self._connected = False
        await self.connect()
        return self._connected

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    async def get(self, key: str) -> Any | None:
        """Return cached value (JSON-deserialized) or None if missing/unavailable.

        Args:
            key: Cache key (use app.infrastructure.cache.keys builders).

        Returns:
            Cached value or None.
        """
        if not self.is_available() or self.redis is None:
            return None
        try:
            value = await self.redis.get(key)
            if value is not None:
                logger.debug("Cache HIT: %s", key)
                return json.loads(value)
            logger.debug("Cache MISS: %s", key)
            return None
        except (redis.ConnectionError, redis.TimeoutError):
            if await self._reconnect() and self.redis is not None:
                try:
                    value = await self.redis.get(key)
                    return json.loads(value) if value is not None else None
                except redis.RedisError:
                    logger.exception("Cache get error for key %s after reconnect", key)
                    return None
            logger.warning("Cache get unavailable for key %s (Redis disconnected)", key)
            return None
        except redis.RedisError:
            logger.exception("Cache get error for key %s", key)
            return None

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value with TTL. Returns True on success.

        Args:
            key: Cache key.
            value: Value to cache (JSON-serializable).
            ttl: Time-to-live in seconds (default 300).

        Returns:
            True if stored, False otherwise.
        """
        if not self.is_available() or self.redis is None:
            return False
        serialized = json.dumps(value)
        try:
            await self.redis.setex(key, ttl, serialized)
            logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)
            return True
        except (redis.ConnectionError, redis.TimeoutError):
            if await self._reconnect() and self.redis is not None:
                try:
                    await self.redis.setex(key, ttl, serialized)
                    return True
                except redis.RedisError:
                    logger.exception("Cache set error for key %s after reconnect", key)
            logger.warning("Cache set unavailable for key %s (Redis disconnected)", key)
            return False
        except redis.RedisError:
            logger.exception("Cache set error for key %s", key)
            return False
