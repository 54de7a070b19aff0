"""Key filters that narrow which configuration keys or attributes are rendered."""

from __future__ import annotations

import re
from collections.abc import Iterable

from app.domain.exceptions import ValidationException


class ConfigurationFilter:
    """Accept only keys in an explicit allow-list."""

    def __init__(self, keys: Iterable[str]) -> None:
        self.keys = frozenset(keys)

    def __call__(self, key: str) -> bool:
        return key in self.keys


class RegexConfigurationFilter:
    """Accept keys that fully match any of the given patterns.

    field names the request parameter the patterns came from, for errors.
    """

    def __init__(
        self, patterns: Iterable[str], field: str = "includeConfRegex"
    ) -> None:
        compiled: list[re.Pattern[str]] = []
        for pattern in patterns:
            try:
                compiled.append(re.compile(pattern))
            except re.error as e:
                raise ValidationException(
                    f"Invalid configuration key pattern {pattern!r}: {e}",
                    field=field,
                ) from e
        self.patterns = tuple(compiled)

    def __call__(self, key: str) -> bool:
        return any(p.fullmatch(key) for p in self.patterns)


def build_configuration_filter(
    include_config: list[str] | None,
    include_config_regex: list[str] | None,
) -> ConfigurationFilter | RegexConfigurationFilter | None:
    """Return the filter for the given params; exact keys win over patterns."""
    if include_config:
        return ConfigurationFilter(include_config)
    if include_config_regex:
        return RegexConfigurationFilter(include_config_regex)
    return None
