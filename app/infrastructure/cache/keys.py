"""Cache key builders. Single place for key format (DRY).

Key components (cluster, user, app_id) must not contain CACHE_KEY_SEP
to avoid ambiguous or colliding keys.
"""

from app.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_APP_VERSIONS


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value contains the cache key separator.

    Args:
        value: String component used in a cache key.
        name: Name of the component (for error message).

    Raises:
        ValueError: If value contains CACHE_KEY_SEP.
    """
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )


def _validate_key_components(components: list[tuple[str, str]]) -> None:
    """Validate multiple key components; raise on first invalid one."""
    for value, name in components:
        _validate_key_component(value, name)


def app_versions_key(cluster: str, user: str, app_id: str) -> str:
    """Cache key for the distinct versions of an app."""
    _validate_key_components(
        [(cluster, "cluster"), (user, "user"), (app_id, "app_id")]
    )
    return CACHE_KEY_SEP.join((CACHE_PREFIX_APP_VERSIONS, cluster, user, app_id))


def is_cacheable(*components: str) -> bool:
    """Return True if every component can be used in a cache key."""
    return all(CACHE_KEY_SEP not in c for c in components)
