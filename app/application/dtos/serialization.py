"""Serialization context: how much detail a response renders.

Use cases return their result together with a SerializationContext
(a Projection); the presentation serializers read the context directly.
Nothing here is request-global state.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from app.domain.enums import DetailLevel

KeyFilter = Callable[[str], bool]

T = TypeVar("T")
V = TypeVar("V")


@dataclass(frozen=True)
class SerializationContext:
    """Detail level plus an optional key filter for configuration/attributes."""

    detail_level: DetailLevel = DetailLevel.EVERYTHING
    key_filter: KeyFilter | None = None

    def filter_mapping(self, mapping: Mapping[str, V]) -> dict[str, V]:
        """Return the entries of mapping whose keys pass the key filter."""
        if self.key_filter is None:
            return dict(mapping)
        return {k: v for k, v in mapping.items() if self.key_filter(k)}


@dataclass(frozen=True)
class Projection(Generic[T]):
    """A use case result and the context it must be serialized with."""

    value: T
    context: SerializationContext = field(default_factory=SerializationContext)
