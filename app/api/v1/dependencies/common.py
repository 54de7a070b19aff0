"""Shared dependencies: cache service from app state."""

from fastapi import Request

from app.infrastructure.cache import CacheService


def get_cache(request: Request) -> CacheService | None:
    """Return the cache set up in the lifespan, or None when Redis is disabled."""
    return getattr(request.app.state, "cache", None)
