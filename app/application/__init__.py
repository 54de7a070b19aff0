"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, cache).
"""

from app.application.interfaces import (
    IAppVersionRepository,
    IFlowKeyCodec,
    IHdfsStatsRepository,
    IJobHistoryRepository,
    IRunIdPolicy,
)
from app.application.services import FlowKeyConverter, RunIdPolicy
from app.application.use_cases import (
    GetAppVersionsUseCase,
    GetFlowSeriesUseCase,
    GetFlowStatsPageUseCase,
    GetHdfsPathTimeSeriesUseCase,
    GetHdfsStatsUseCase,
    GetJobFlowUseCase,
    GetJobUseCase,
)

__all__ = [
    "FlowKeyConverter",
    "GetAppVersionsUseCase",
    "GetFlowSeriesUseCase",
    "GetFlowStatsPageUseCase",
    "GetHdfsPathTimeSeriesUseCase",
    "GetHdfsStatsUseCase",
    "GetJobFlowUseCase",
    "GetJobUseCase",
    "IAppVersionRepository",
    "IFlowKeyCodec",
    "IHdfsStatsRepository",
    "IJobHistoryRepository",
    "IRunIdPolicy",
    "RunIdPolicy",
]
