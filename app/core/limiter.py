"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the
same instance without circular imports. Central limit strings and
decorators keep rate limits DRY.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# Single source of truth for rate limit strings and decorators.
QUERY_LIMIT = "600/minute"
# Flow series and flow stats pull nested job detail; keep them tighter.
HEAVY_QUERY_LIMIT = "120/minute"

limit_queries = limiter.limit(QUERY_LIMIT)
limit_heavy_queries = limiter.limit(HEAVY_QUERY_LIMIT)
