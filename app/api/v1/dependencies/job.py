"""Job and app version use case dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.application.interfaces.repositories import (
    IAppVersionRepository,
    IJobHistoryRepository,
)
from app.application.use_cases.jobs import (
    GetAppVersionsUseCase,
    GetJobFlowUseCase,
    GetJobUseCase,
)

from .db import get_app_version_repo, get_job_history_repo


async def get_job_use_case(
    job_history_repo: Annotated[IJobHistoryRepository, Depends(get_job_history_repo)],
) -> GetJobUseCase:
    return GetJobUseCase(job_history_repo)


async def get_job_flow_use_case(
    job_history_repo: Annotated[IJobHistoryRepository, Depends(get_job_history_repo)],
) -> GetJobFlowUseCase:
    return GetJobFlowUseCase(job_history_repo)


async def get_app_versions_use_case(
    app_version_repo: Annotated[IAppVersionRepository, Depends(get_app_version_repo)],
) -> GetAppVersionsUseCase:
    return GetAppVersionsUseCase(app_version_repo)
