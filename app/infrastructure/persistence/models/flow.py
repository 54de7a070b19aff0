"""Flow ORM model. One row per application run; stats aggregated over its jobs."""

from sqlalchemy import BigInteger, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base


class FlowRecord(Base):
    """Flow run with aggregated job statistics. Table: flow.

    (cluster, user_name, app_id, version, run_id) is the flow key; scans
    order by it. Times are epoch milliseconds, run_id is epoch seconds.
    """

    __tablename__ = "flow"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cluster: Mapped[str] = mapped_column(String(255), nullable=False)
    user_name: Mapped[str] = mapped_column(String(255), nullable=False)
    app_id: Mapped[str] = mapped_column(String(1024), nullable=False)
    version: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    run_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    flow_name: Mapped[str] = mapped_column(String(1024), nullable=False, default="")
    queue: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    job_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_maps: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    total_reduces: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    map_slot_millis: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    reduce_slot_millis: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0
    )
    hdfs_bytes_read: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    hdfs_bytes_written: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0
    )
    submit_time: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    launch_time: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    finish_time: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint(
            "cluster",
            "user_name",
            "app_id",
            "version",
            "run_id",
            name="uq_flow_key",
        ),
        Index("ix_flow_app_run", "cluster", "user_name", "app_id", "run_id"),
    )
