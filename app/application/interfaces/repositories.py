"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities only; no infrastructure imports.
Implementations raise StorageUnavailableException on I/O failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.entities import Flow, HdfsStats, JobDetails, VersionInfo
    from app.domain.value_objects import FlowKey


# Job history repository interface
class IJobHistoryRepository(Protocol):
    """Protocol for job and flow history reads (DIP)."""

    async def get_job_by_id(self, cluster: str, job_id: str) -> JobDetails | None:
        """Return a job by cluster and job id, or None."""

    async def get_flow_by_job_id(self, cluster: str, job_id: str) -> Flow | None:
        """Return the flow containing the given job (with all its jobs), or None."""

    async def get_flow_series(
        self,
        cluster: str,
        user: str,
        app_id: str,
        version: str | None,
        limit: int,
    ) -> list[Flow]:
        """Return the most recent flows for the app (newest first), with jobs."""

    async def scan_flow_stats(
        self,
        cluster: str,
        user: str,
        app_id: str,
        version: str | None,
        start_time: int,
        end_time: int,
        limit: int,
        start_key: FlowKey | None = None,
    ) -> list[Flow]:
        """Return up to limit flows ascending by FlowKey.

        Only flows with start_time <= run_id <= end_time are returned. When
        start_key is given the scan begins at that key (inclusive).
        """


# App version repository interface
class IAppVersionRepository(Protocol):
    """Protocol for distinct application versions (DIP)."""

    async def get_distinct_versions(
        self, cluster: str, user: str, app_id: str
    ) -> list[VersionInfo]:
        """Return versions seen for the app, most recently run first."""


# HDFS stats repository interface
class IHdfsStatsRepository(Protocol):
    """Protocol for directory snapshot reads (DIP)."""

    async def lookup_bucket(
        self,
        cluster: str,
        path_prefix: str | None,
        run_id: int,
        limit: int,
    ) -> list[HdfsStats]:
        """Return snapshots in the hourly bucket containing run_id (possibly empty)."""

    async def scan_time_series(
        self,
        cluster: str,
        path: str,
        attribute: str,
        start_time: int,
        end_time: int,
        limit: int,
    ) -> list[HdfsStats]:
        """Return snapshots of one path from start_time back to end_time, newest first."""
