"""Job lookup use cases: single job, the flow around a job, app versions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.dtos.serialization import Projection, SerializationContext
from app.domain.exceptions import ResourceNotFoundException

if TYPE_CHECKING:
    from app.application.interfaces.repositories import (
        IAppVersionRepository,
        IJobHistoryRepository,
    )
    from app.domain.entities import Flow, JobDetails, VersionInfo


class GetJobUseCase:
    """Fetch one job by cluster and job id."""

    def __init__(self, job_history_repo: "IJobHistoryRepository") -> None:
        self.job_history_repo = job_history_repo

    async def execute(self, cluster: str, job_id: str) -> Projection[JobDetails]:
        """Return the job with full detail.

        Raises:
            ResourceNotFoundException: If no such job is recorded.
        """
        job = await self.job_history_repo.get_job_by_id(cluster, job_id)
        if job is None:
            raise ResourceNotFoundException("job", f"{cluster}/{job_id}")
        return Projection(job, SerializationContext())


class GetJobFlowUseCase:
    """Fetch the flow a job belongs to, with all of the flow's jobs."""

    def __init__(self, job_history_repo: "IJobHistoryRepository") -> None:
        self.job_history_repo = job_history_repo

    async def execute(self, cluster: str, job_id: str) -> Projection[Flow]:
        """Return the flow with full detail.

        Raises:
            ResourceNotFoundException: If the job (or its flow) is not recorded.
        """
        flow = await self.job_history_repo.get_flow_by_job_id(cluster, job_id)
        if flow is None:
            raise ResourceNotFoundException("flow", f"{cluster}/{job_id}")
        return Projection(flow, SerializationContext())


class GetAppVersionsUseCase:
    """List distinct versions of an app, most recently run first."""

    def __init__(self, app_version_repo: "IAppVersionRepository") -> None:
        self.app_version_repo = app_version_repo

    async def execute(
        self, cluster: str, user: str, app_id: str, limit: int = 0
    ) -> list[VersionInfo]:
        """Return versions; limit > 0 keeps only the newest limit versions."""
        versions = await self.app_version_repo.get_distinct_versions(
            cluster.strip(), user.strip(), app_id.strip()
        )
        if limit > 0:
            return versions[:limit]
        return versions
