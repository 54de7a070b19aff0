"""Pytest configuration and fixtures for the job history API.

HTTP tests run against app.main:app with the repository dependencies
swapped for the in-memory fakes below (app.dependency_overrides).
Repository integration tests use an in-memory SQLite database.
"""

import os

# Tests never reach Redis, a collector or a real job history store.
os.environ["REDIS_ENABLED"] = "false"
os.environ["TELEMETRY_ENABLED"] = "false"
os.environ["DATABASE_URL"] = ""

from collections.abc import AsyncIterator  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.api.v1.dependencies import (  # noqa: E402
    get_app_version_repo,
    get_hdfs_stats_repo,
    get_job_history_repo,
)
from app.application.services.run_id_policy import hour_bucket  # noqa: E402
from app.core.config import get_settings  # noqa: E402
from app.core.limiter import limiter  # noqa: E402
from app.domain.entities import Flow, HdfsStats, JobDetails, VersionInfo  # noqa: E402
from app.domain.value_objects import FlowKey, JobKey  # noqa: E402
from app.infrastructure.persistence import models  # noqa: E402,F401
from app.infrastructure.persistence.database import Base  # noqa: E402
from app.main import app  # noqa: E402

get_settings.cache_clear()
limiter.enabled = False

CLUSTER = "cluster1@dc1"
USER = "alice"
APP_ID = "wordcount"


def make_job(key: FlowKey, job_id: str, **fields) -> JobDetails:
    """Build a job under the given flow with sensible statistics."""
    defaults = {
        "job_name": f"{key.app_id} step",
        "user": key.user_name,
        "priority": "NORMAL",
        "status": "SUCCEEDED",
        "submit_time": key.run_id * 1000,
        "launch_time": key.run_id * 1000 + 500,
        "finish_time": key.run_id * 1000 + 60_500,
        "total_maps": 10,
        "total_reduces": 2,
        "finished_maps": 10,
        "finished_reduces": 2,
        "configuration": {
            "mapreduce.job.queuename": "default",
            "mapreduce.map.memory.mb": "2048",
            "batch.desc": "nightly",
        },
        "counters": {"FILE_BYTES_READ": 1024, "MAP_INPUT_RECORDS": 50},
    }
    defaults.update(fields)
    return JobDetails(job_key=JobKey(key, job_id), **defaults)


def make_flow(
    version: str,
    run_id: int,
    *,
    cluster: str = CLUSTER,
    user: str = USER,
    app_id: str = APP_ID,
    job_ids: tuple[str, ...] = (),
) -> Flow:
    """Build a flow; job_ids become jobs of the flow."""
    key = FlowKey(cluster, user, app_id, version, run_id)
    jobs = [make_job(key, job_id) for job_id in job_ids]
    return Flow(
        flow_key=key,
        flow_name=f"{app_id}-{version}",
        queue="default",
        job_count=len(jobs),
        total_maps=sum(j.total_maps for j in jobs),
        total_reduces=sum(j.total_reduces for j in jobs),
        submit_time=run_id * 1000,
        launch_time=run_id * 1000 + 500,
        finish_time=run_id * 1000 + 90_500,
        jobs=jobs,
    )


class FakeJobHistoryRepository:
    """In-memory IJobHistoryRepository; scans in flow key order."""

    def __init__(self, flows: list[Flow] | None = None) -> None:
        self.flows = sorted(flows or [], key=lambda f: f.flow_key)
        self.scan_calls: list[dict] = []

    async def get_job_by_id(self, cluster: str, job_id: str) -> JobDetails | None:
        for flow in self.flows:
            for job in flow.jobs:
                if job.job_key.cluster == cluster and job.job_id == job_id:
                    return job
        return None

    async def get_flow_by_job_id(self, cluster: str, job_id: str) -> Flow | None:
        for flow in self.flows:
            if flow.flow_key.cluster != cluster:
                continue
            if any(j.job_id == job_id for j in flow.jobs):
                return flow
        return None

    async def get_flow_series(self, cluster, user, app_id, version, limit) -> list[Flow]:
        matching = [
            f
            for f in self.flows
            if f.flow_key.in_scope(cluster, user, app_id, version or None)
        ]
        matching.sort(key=lambda f: (-f.run_id, f.version))
        return matching[:limit]

    async def scan_flow_stats(
        self,
        cluster,
        user,
        app_id,
        version,
        start_time,
        end_time,
        limit,
        start_key=None,
    ) -> list[Flow]:
        self.scan_calls.append(
            {
                "version": version,
                "start_time": start_time,
                "end_time": end_time,
                "limit": limit,
                "start_key": start_key,
            }
        )
        out = []
        for f in self.flows:
            if not f.flow_key.in_scope(cluster, user, app_id, version):
                continue
            if not start_time <= f.run_id <= end_time:
                continue
            if start_key is not None and f.flow_key < start_key:
                continue
            out.append(f)
            if len(out) == limit:
                break
        return out


class FakeHdfsStatsRepository:
    """In-memory IHdfsStatsRepository that records every bucket asked for."""

    def __init__(self, stats: list[HdfsStats] | None = None) -> None:
        self.stats = stats or []
        self.lookups: list[int] = []
        self.series_calls: list[dict] = []

    async def lookup_bucket(self, cluster, path_prefix, run_id, limit) -> list[HdfsStats]:
        self.lookups.append(run_id)
        bucket = hour_bucket(run_id)
        rows = [
            s
            for s in self.stats
            if s.cluster == cluster
            and s.run_id == bucket
            and (not path_prefix or s.path.startswith(path_prefix))
        ]
        rows.sort(key=lambda s: s.path)
        return rows[:limit]

    async def scan_time_series(
        self, cluster, path, attribute, start_time, end_time, limit
    ) -> list[HdfsStats]:
        self.series_calls.append(
            {"path": path, "start_time": start_time, "end_time": end_time, "limit": limit}
        )
        rows = [
            s
            for s in self.stats
            if s.cluster == cluster and s.path == path and end_time < s.run_id <= start_time
        ]
        rows.sort(key=lambda s: s.run_id, reverse=True)
        return rows[:limit]


class FakeAppVersionRepository:
    """In-memory IAppVersionRepository."""

    def __init__(self, versions: dict[tuple[str, str, str], list[VersionInfo]] | None = None):
        self.versions = versions or {}

    async def get_distinct_versions(self, cluster, user, app_id) -> list[VersionInfo]:
        return list(self.versions.get((cluster, user, app_id), []))


@pytest.fixture
def job_history_repo() -> FakeJobHistoryRepository:
    return FakeJobHistoryRepository()


@pytest.fixture
def hdfs_stats_repo() -> FakeHdfsStatsRepository:
    return FakeHdfsStatsRepository()


@pytest.fixture
def app_version_repo() -> FakeAppVersionRepository:
    return FakeAppVersionRepository()


@pytest.fixture
def override_repositories(job_history_repo, hdfs_stats_repo, app_version_repo):
    """Route every repository dependency to the in-memory fakes."""
    app.dependency_overrides[get_job_history_repo] = lambda: job_history_repo
    app.dependency_overrides[get_hdfs_stats_repo] = lambda: hdfs_stats_repo
    app.dependency_overrides[get_app_version_repo] = lambda: app_version_repo
    yield
    app.dependency_overrides.clear()


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    """Session on a fresh in-memory SQLite database with the full schema."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()
