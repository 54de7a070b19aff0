"""Domain value objects and shared value types."""

from app.domain.value_objects.core import FlowKey, JobKey

__all__ = [
    "FlowKey",
    "JobKey",
]
