"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import Flow, HdfsStats, JobDetails, VersionInfo
from app.domain.enums import DetailLevel
from app.domain.exceptions import (
    InvalidCursorException,
    JobHistoryException,
    MissingParameterException,
    ResourceNotFoundException,
    StorageNotConfiguredException,
    StorageUnavailableException,
    ValidationException,
)
from app.domain.value_objects import FlowKey, JobKey

__all__ = [
    # Entities
    "Flow",
    "HdfsStats",
    "JobDetails",
    "VersionInfo",
    # Enums
    "DetailLevel",
    # Exceptions
    "InvalidCursorException",
    "JobHistoryException",
    "MissingParameterException",
    "ResourceNotFoundException",
    "StorageNotConfiguredException",
    "StorageUnavailableException",
    "ValidationException",
    # Value objects
    "FlowKey",
    "JobKey",
]
