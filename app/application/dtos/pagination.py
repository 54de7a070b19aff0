"""Paginated result DTO (one bounded page plus continuation cursor)."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class PaginatedResult(Generic[T]):
    """One page of an ordered scan.

    values holds at most limit items in storage scan order. next_cursor is
    the encoded key of the first item of the following page, or None when
    the scan is exhausted. request_parameters echoes the normalized request
    so clients can replay it with the cursor.
    """

    limit: int
    values: list[T] = field(default_factory=list)
    next_cursor: bytes | None = None
    request_parameters: dict[str, str] = field(default_factory=dict)

    def add_request_parameter(self, name: str, value: str) -> None:
        """Record one normalized request parameter for client-side replay."""
        self.request_parameters[name] = value

    @property
    def has_next(self) -> bool:
        return self.next_cursor is not None
