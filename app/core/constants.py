"""Core constants: cache key prefixes and shared literal values.

Single source of truth for cache key structure (DRY). Used by
infrastructure cache and cacheable repositories.
"""

# Cache key prefixes
CACHE_PREFIX_APP_VERSIONS = "appversions"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"
