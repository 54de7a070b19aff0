"""Application use cases: one entry point per query."""

from app.application.use_cases.flows import (
    GetFlowSeriesUseCase,
    GetFlowStatsPageUseCase,
)
from app.application.use_cases.hdfs import (
    GetHdfsPathTimeSeriesUseCase,
    GetHdfsStatsUseCase,
)
from app.application.use_cases.jobs import (
    GetAppVersionsUseCase,
    GetJobFlowUseCase,
    GetJobUseCase,
)

__all__ = [
    "GetAppVersionsUseCase",
    "GetFlowSeriesUseCase",
    "GetFlowStatsPageUseCase",
    "GetHdfsPathTimeSeriesUseCase",
    "GetHdfsStatsUseCase",
    "GetJobFlowUseCase",
    "GetJobUseCase",
]
