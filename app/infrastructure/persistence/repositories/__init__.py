"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.app_version_repo import (
    AppVersionRepository,
)
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.hdfs_stats_repo import (
    HdfsStatsRepository,
)
from app.infrastructure.persistence.repositories.job_history_repo import (
    JobHistoryRepository,
)

__all__ = [
    "AppVersionRepository",
    "BaseRepository",
    "HdfsStatsRepository",
    "JobHistoryRepository",
]
