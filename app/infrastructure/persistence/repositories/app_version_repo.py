"""App version repository. Optional cache (inject cache_ttl). Uses app_versions_key."""

from dataclasses import asdict
from typing import Any

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities import VersionInfo
from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.keys import app_versions_key, is_cacheable
from app.infrastructure.persistence.models.flow import FlowRecord
from app.infrastructure.persistence.repositories.base import BaseRepository


def _versions_from_cached(cached: list[dict[str, Any]]) -> list[VersionInfo]:
    return [VersionInfo(version=d["version"], timestamp=d["timestamp"]) for d in cached]


class AppVersionRepository(BaseRepository):
    """Distinct versions of an app, derived from its flows.

    A version's timestamp is the start of its latest run, in epoch
    milliseconds. Listings are cached per (cluster, user, app_id) when a
    cache is injected and available.
    """

    def __init__(
        self,
        db: AsyncSession,
        cache_service: CacheProtocol | None = None,
        cache_ttl: int = 600,
    ) -> None:
        super().__init__(db)
        self.cache = cache_service
        self.cache_ttl = cache_ttl

    async def get_distinct_versions(
        self, cluster: str, user: str, app_id: str
    ) -> list[VersionInfo]:
        """Return versions, most recently run first; from cache if available."""
        use_cache = (
            self.cache is not None
            and self.cache.is_available()
            and is_cacheable(cluster, user, app_id)
        )
        if use_cache:
            cached = await self.cache.get(app_versions_key(cluster, user, app_id))
            if cached is not None:
                return _versions_from_cached(cached)

        versions = await self._load_versions(cluster, user, app_id)

        if use_cache:
            await self.cache.set(
                app_versions_key(cluster, user, app_id),
                [asdict(v) for v in versions],
                ttl=self.cache_ttl,
            )
        return versions

    async def _load_versions(
        self, cluster: str, user: str, app_id: str
    ) -> list[VersionInfo]:
        latest_run = func.max(FlowRecord.run_id).label("latest_run")
        stmt = (
            select(FlowRecord.version, latest_run)
            .where(
                FlowRecord.cluster == cluster,
                FlowRecord.user_name == user,
                FlowRecord.app_id == app_id,
            )
            .group_by(FlowRecord.version)
            .order_by(desc(latest_run), FlowRecord.version)
        )
        with self.storage_errors("get_distinct_versions"):
            result = await self.db.execute(stmt)
            rows = result.all()
        return [VersionInfo(version=v, timestamp=int(run) * 1000) for v, run in rows]
