"""Flow use case dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.application.interfaces.repositories import IJobHistoryRepository
from app.application.services import FlowKeyConverter
from app.application.use_cases.flows import (
    GetFlowSeriesUseCase,
    GetFlowStatsPageUseCase,
)

from .db import get_job_history_repo


def get_flow_key_converter() -> FlowKeyConverter:
    """Cursor codec (stateless)."""
    return FlowKeyConverter()


async def get_flow_stats_page_use_case(
    job_history_repo: Annotated[IJobHistoryRepository, Depends(get_job_history_repo)],
    codec: Annotated[FlowKeyConverter, Depends(get_flow_key_converter)],
) -> GetFlowStatsPageUseCase:
    """Paginated flow statistics use case."""
    return GetFlowStatsPageUseCase(job_history_repo=job_history_repo, flow_key_codec=codec)


async def get_flow_series_use_case(
    job_history_repo: Annotated[IJobHistoryRepository, Depends(get_job_history_repo)],
) -> GetFlowSeriesUseCase:
    """Latest flows use case."""
    return GetFlowSeriesUseCase(job_history_repo=job_history_repo)
