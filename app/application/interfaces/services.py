"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.value_objects import FlowKey


# Cursor codec interface
class IFlowKeyCodec(Protocol):
    """Protocol for encoding flow keys into opaque pagination cursors."""

    def to_bytes(self, key: FlowKey) -> bytes:
        """Encode a flow key to bytes (exact round trip with from_bytes)."""

    def from_bytes(self, data: bytes) -> FlowKey:
        """Decode bytes into a flow key; raise ValueError when malformed."""

    def decode_cursor(self, cursor: str) -> FlowKey:
        """Decode a printable cursor; raise ValueError when malformed."""


# Bucket stepping interface
class IRunIdPolicy(Protocol):
    """Protocol for choosing default and older HDFS snapshot buckets."""

    @property
    def max_attempts(self) -> int:
        """Number of older buckets the policy can propose."""

    def default_run_id(self, now: float) -> int:
        """Return the default bucket for a request made at now."""

    def older_run_id(self, attempt: int, run_id: int) -> int:
        """Return a bucket strictly older than run_id."""
