"""Job ORM model. One row per job execution, owned by a flow."""

from typing import Any

from sqlalchemy import (
    JSON,
    BigInteger,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests).
JsonType = JSON().with_variant(JSONB(), "postgresql")


class JobRecord(Base):
    """Job execution with task counts, counters and configuration. Table: job."""

    __tablename__ = "job"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    flow_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("flow.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    cluster: Mapped[str] = mapped_column(String(255), nullable=False)
    job_id: Mapped[str] = mapped_column(String(255), nullable=False)
    job_name: Mapped[str] = mapped_column(String(1024), nullable=False, default="")
    user: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    priority: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    status: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    submit_time: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    launch_time: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    finish_time: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    total_maps: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    total_reduces: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    finished_maps: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    finished_reduces: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0
    )
    failed_maps: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    failed_reduces: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    map_slot_millis: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    reduce_slot_millis: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0
    )
    hdfs_bytes_read: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    hdfs_bytes_written: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0
    )
    configuration: Mapped[dict[str, Any] | None] = mapped_column(
        JsonType, nullable=True
    )
    counters: Mapped[dict[str, Any] | None] = mapped_column(JsonType, nullable=True)

    __table_args__ = (
        UniqueConstraint("cluster", "job_id", name="uq_job_cluster_job_id"),
    )
