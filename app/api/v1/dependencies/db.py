"""Repository dependencies (composition root).

Every repository shares the request's AsyncSession from get_db.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.infrastructure.cache import CacheService
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.repositories import (
    AppVersionRepository,
    HdfsStatsRepository,
    JobHistoryRepository,
)

from .common import get_cache


async def get_job_history_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> JobHistoryRepository:
    """Job and flow repository for read operations."""
    return JobHistoryRepository(db)


async def get_app_version_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
    cache: Annotated[CacheService | None, Depends(get_cache)],
) -> AppVersionRepository:
    """App version repository with the Redis cache when it is connected."""
    return AppVersionRepository(
        db,
        cache_service=cache,
        cache_ttl=get_settings().cache_ttl_app_versions,
    )


async def get_hdfs_stats_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> HdfsStatsRepository:
    """HDFS snapshot repository for read operations."""
    return HdfsStatsRepository(db)
