"""HDFS stats repository. Hourly directory snapshots; returns domain entities."""

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services.run_id_policy import hour_bucket
from app.domain.entities import HdfsStats
from app.infrastructure.persistence.models.hdfs_stats import HdfsStatsRecord
from app.infrastructure.persistence.repositories.base import BaseRepository


def _stats_to_entity(r: HdfsStatsRecord) -> HdfsStats:
    """Map ORM HdfsStatsRecord to domain HdfsStats."""
    return HdfsStats(
        cluster=r.cluster,
        path=r.path,
        run_id=r.run_id,
        attributes={str(k): v for k, v in (r.attributes or {}).items()},
    )


class HdfsStatsRepository(BaseRepository):
    """SQL implementation of IHdfsStatsRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db)

    async def lookup_bucket(
        self,
        cluster: str,
        path_prefix: str | None,
        run_id: int,
        limit: int,
    ) -> list[HdfsStats]:
        """Return snapshots in run_id's hour, ordered by path.

        run_id is truncated to the top of its hour before the lookup.
        path_prefix, when given, keeps only paths starting with it.
        """
        stmt = select(HdfsStatsRecord).where(
            HdfsStatsRecord.cluster == cluster,
            HdfsStatsRecord.run_id == hour_bucket(run_id),
        )
        if path_prefix:
            stmt = stmt.where(HdfsStatsRecord.path.startswith(path_prefix, autoescape=True))
        stmt = stmt.order_by(HdfsStatsRecord.path).limit(limit)
        with self.storage_errors("lookup_bucket"):
            result = await self.db.execute(stmt)
            rows = result.scalars().all()
        return [_stats_to_entity(r) for r in rows]

    async def scan_time_series(
        self,
        cluster: str,
        path: str,
        attribute: str,
        start_time: int,
        end_time: int,
        limit: int,
    ) -> list[HdfsStats]:
        """Return snapshots of path with end_time < run_id <= start_time, newest first.

        Every attribute is loaded; narrowing to attribute happens at
        serialization.
        """
        stmt = (
            select(HdfsStatsRecord)
            .where(
                HdfsStatsRecord.cluster == cluster,
                HdfsStatsRecord.path == path,
                HdfsStatsRecord.run_id <= start_time,
                HdfsStatsRecord.run_id > end_time,
            )
            .order_by(desc(HdfsStatsRecord.run_id))
            .limit(limit)
        )
        with self.storage_errors("scan_time_series"):
            result = await self.db.execute(stmt)
            rows = result.scalars().all()
        return [_stats_to_entity(r) for r in rows]
