"""Persistence models: ORM entities for the job history store."""

from app.infrastructure.persistence.models.flow import FlowRecord
from app.infrastructure.persistence.models.hdfs_stats import HdfsStatsRecord
from app.infrastructure.persistence.models.job import JobRecord

__all__ = [
    "FlowRecord",
    "HdfsStatsRecord",
    "JobRecord",
]
