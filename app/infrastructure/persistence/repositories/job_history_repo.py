"""Job history repository: jobs, flows and flow statistics scans.

Returns domain entities. Flows are always returned with their jobs; how
much of each is rendered is decided by the serialization context.
"""

from collections.abc import Sequence

from sqlalchemy import and_, desc, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities import Flow, JobDetails
from app.domain.value_objects import FlowKey, JobKey
from app.infrastructure.persistence.models.flow import FlowRecord
from app.infrastructure.persistence.models.job import JobRecord
from app.infrastructure.persistence.repositories.base import BaseRepository


def _flow_key(f: FlowRecord) -> FlowKey:
    return FlowKey(f.cluster, f.user_name, f.app_id, f.version, f.run_id)


def _job_to_entity(j: JobRecord, flow_key: FlowKey) -> JobDetails:
    """Map ORM JobRecord to domain JobDetails."""
    return JobDetails(
        job_key=JobKey(flow_key, j.job_id),
        job_name=j.job_name,
        user=j.user,
        priority=j.priority,
        status=j.status,
        submit_time=j.submit_time,
        launch_time=j.launch_time,
        finish_time=j.finish_time,
        total_maps=j.total_maps,
        total_reduces=j.total_reduces,
        finished_maps=j.finished_maps,
        finished_reduces=j.finished_reduces,
        failed_maps=j.failed_maps,
        failed_reduces=j.failed_reduces,
        map_slot_millis=j.map_slot_millis,
        reduce_slot_millis=j.reduce_slot_millis,
        hdfs_bytes_read=j.hdfs_bytes_read,
        hdfs_bytes_written=j.hdfs_bytes_written,
        configuration={str(k): str(v) for k, v in (j.configuration or {}).items()},
        counters={str(k): int(v) for k, v in (j.counters or {}).items()},
    )


def _flow_to_entity(f: FlowRecord, jobs: list[JobDetails]) -> Flow:
    """Map ORM FlowRecord (plus its mapped jobs) to domain Flow."""
    return Flow(
        flow_key=_flow_key(f),
        flow_name=f.flow_name,
        queue=f.queue,
        job_count=f.job_count,
        total_maps=f.total_maps,
        total_reduces=f.total_reduces,
        map_slot_millis=f.map_slot_millis,
        reduce_slot_millis=f.reduce_slot_millis,
        hdfs_bytes_read=f.hdfs_bytes_read,
        hdfs_bytes_written=f.hdfs_bytes_written,
        submit_time=f.submit_time,
        launch_time=f.launch_time,
        finish_time=f.finish_time,
        jobs=jobs,
    )


class JobHistoryRepository(BaseRepository):
    """SQL implementation of IJobHistoryRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db)

    async def get_job_by_id(self, cluster: str, job_id: str) -> JobDetails | None:
        with self.storage_errors("get_job_by_id"):
            result = await self.db.execute(
                select(JobRecord, FlowRecord)
                .join(FlowRecord, JobRecord.flow_id == FlowRecord.id)
                .where(JobRecord.cluster == cluster, JobRecord.job_id == job_id)
            )
            row = result.first()
        if row is None:
            return None
        job, flow = row
        return _job_to_entity(job, _flow_key(flow))

    async def get_flow_by_job_id(self, cluster: str, job_id: str) -> Flow | None:
        with self.storage_errors("get_flow_by_job_id"):
            result = await self.db.execute(
                select(FlowRecord)
                .join(JobRecord, JobRecord.flow_id == FlowRecord.id)
                .where(JobRecord.cluster == cluster, JobRecord.job_id == job_id)
            )
            flow = result.scalar_one_or_none()
            if flow is None:
                return None
            flows = await self._with_jobs([flow])
        return flows[0]

    async def get_flow_series(
        self,
        cluster: str,
        user: str,
        app_id: str,
        version: str | None,
        limit: int,
    ) -> list[Flow]:
        """Return the latest flows for the app, newest run first."""
        stmt = select(FlowRecord).where(
            FlowRecord.cluster == cluster,
            FlowRecord.user_name == user,
            FlowRecord.app_id == app_id,
        )
        if version:
            stmt = stmt.where(FlowRecord.version == version)
        stmt = stmt.order_by(desc(FlowRecord.run_id), FlowRecord.version).limit(limit)
        with self.storage_errors("get_flow_series"):
            result = await self.db.execute(stmt)
            return await self._with_jobs(result.scalars().all())

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
        """Return up to limit flows ascending by flow key, from start_key inclusive."""
        stmt = select(FlowRecord).where(
            FlowRecord.cluster == cluster,
            FlowRecord.user_name == user,
            FlowRecord.app_id == app_id,
            FlowRecord.run_id >= start_time,
            FlowRecord.run_id <= end_time,
        )
        if version:
            stmt = stmt.where(FlowRecord.version == version)
        if start_key is not None:
            stmt = stmt.where(
                or_(
                    FlowRecord.version > start_key.version,
                    and_(
                        FlowRecord.version == start_key.version,
                        FlowRecord.run_id >= start_key.run_id,
                    ),
                )
            )
        stmt = stmt.order_by(FlowRecord.version, FlowRecord.run_id).limit(limit)
        with self.storage_errors("scan_flow_stats"):
            result = await self.db.execute(stmt)
            return await self._with_jobs(result.scalars().all())

    async def _with_jobs(self, flows: Sequence[FlowRecord]) -> list[Flow]:
        """Load the jobs of all given flows in one query; keep flow order."""
        if not flows:
            return []
        result = await self.db.execute(
            select(JobRecord)
            .where(JobRecord.flow_id.in_([f.id for f in flows]))
            .order_by(JobRecord.flow_id, JobRecord.submit_time, JobRecord.job_id)
        )
        jobs_by_flow: dict[int, list[JobRecord]] = {f.id: [] for f in flows}
        for j in result.scalars().all():
            jobs_by_flow[j.flow_id].append(j)
        out: list[Flow] = []
        for f in flows:
            key = _flow_key(f)
            out.append(
                _flow_to_entity(f, [_job_to_entity(j, key) for j in jobs_by_flow[f.id]])
            )
        return out
