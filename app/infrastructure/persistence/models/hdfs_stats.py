"""HDFS stats ORM model. Directory usage snapshots per hourly bucket."""

from typing import Any

from sqlalchemy import BigInteger, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.job import JsonType


class HdfsStatsRecord(Base):
    """Snapshot of one directory in one hourly bucket. Table: hdfs_stats.

    run_id is always the top of an hour (epoch seconds).
    """

    __tablename__ = "hdfs_stats"

    cluster: Mapped[str] = mapped_column(String(255), primary_key=True)
    path: Mapped[str] = mapped_column(String(4096), primary_key=True)
    run_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    attributes: Mapped[dict[str, Any]] = mapped_column(JsonType, nullable=False)

    __table_args__ = (
        Index("ix_hdfs_stats_cluster_run", "cluster", "run_id"),
    )
