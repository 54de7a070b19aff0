"""Application DTOs (no ORM dependency)."""

from app.application.dtos.pagination import PaginatedResult
from app.application.dtos.queries import (
    FlowSeriesQuery,
    FlowStatsQuery,
    HdfsStatsQuery,
    PathSeriesQuery,
)
from app.application.dtos.serialization import Projection, SerializationContext

__all__ = [
    "FlowSeriesQuery",
    "FlowStatsQuery",
    "HdfsStatsQuery",
    "PaginatedResult",
    "PathSeriesQuery",
    "Projection",
    "SerializationContext",
]
