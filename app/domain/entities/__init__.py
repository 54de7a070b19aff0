"""Domain entities and aggregates.

Pure domain models; no ORM or persistence concerns.
"""

from app.domain.entities.app_version import VersionInfo
from app.domain.entities.flow import Flow
from app.domain.entities.hdfs_stats import HdfsStats
from app.domain.entities.job import JobDetails

__all__ = [
    "Flow",
    "HdfsStats",
    "JobDetails",
    "VersionInfo",
]
