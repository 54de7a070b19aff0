"""Cache protocol for the repository layer (DIP)."""

from typing import Any, Protocol


class CacheProtocol(Protocol):
    """Protocol for cache backends (e.g. Redis). Used by cacheable repositories."""

    def is_available(self) -> bool:
        """Return True if cache is connected and usable."""
        ...

    async def get(self, key: str) -> Any:
        """Return cached value or None."""
        ...

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value with TTL in seconds."""
        ...
