"""API request/response schemas (Pydantic) and result serializers."""

from app.schemas.app_version import VersionInfoResponse
from app.schemas.flow import FlowResponse, FlowStatsPageResponse
from app.schemas.hdfs import HdfsStatsResponse
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from app.schemas.job import JobResponse

__all__ = [
    "FlowResponse",
    "FlowStatsPageResponse",
    "HdfsStatsResponse",
    "HealthResponse",
    "JobResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "VersionInfoResponse",
]
