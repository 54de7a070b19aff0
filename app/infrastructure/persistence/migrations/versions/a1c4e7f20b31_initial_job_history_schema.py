"""Initial schema: flow, job, hdfs_stats

Revision ID: a1c4e7f20b31
Revises:
Create Date: 2026-10-19 10:12:40.118204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "a1c4e7f20b31"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_JSON = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def _count(name: str) -> sa.Column:
    return sa.Column(name, sa.BigInteger(), nullable=False, server_default="0")


def upgrade() -> None:
    """Create job history schema."""
    # Create flow table
    op.create_table(
        "flow",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("cluster", sa.String(length=255), nullable=False),
        sa.Column("user_name", sa.String(length=255), nullable=False),
        sa.Column("app_id", sa.String(length=1024), nullable=False),
        sa.Column("version", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("run_id", sa.BigInteger(), nullable=False),
        sa.Column("flow_name", sa.String(length=1024), nullable=False, server_default=""),
        sa.Column("queue", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("job_count", sa.Integer(), nullable=False, server_default="0"),
        _count("total_maps"),
        _count("total_reduces"),
        _count("map_slot_millis"),
        _count("reduce_slot_millis"),
        _count("hdfs_bytes_read"),
        _count("hdfs_bytes_written"),
        _count("submit_time"),
        _count("launch_time"),
        _count("finish_time"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "cluster", "user_name", "app_id", "version", "run_id", name="uq_flow_key"
        ),
    )
    op.create_index(
        "ix_flow_app_run",
        "flow",
        ["cluster", "user_name", "app_id", "run_id"],
        unique=False,
    )

    # Create job table
    op.create_table(
        "job",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("flow_id", sa.Integer(), nullable=False),
        sa.Column("cluster", sa.String(length=255), nullable=False),
        sa.Column("job_id", sa.String(length=255), nullable=False),
        sa.Column("job_name", sa.String(length=1024), nullable=False, server_default=""),
        sa.Column("user", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("priority", sa.String(length=64), nullable=False, server_default=""),
        sa.Column("status", sa.String(length=64), nullable=False, server_default=""),
        _count("submit_time"),
        _count("launch_time"),
        _count("finish_time"),
        _count("total_maps"),
        _count("total_reduces"),
        _count("finished_maps"),
        _count("finished_reduces"),
        _count("failed_maps"),
        _count("failed_reduces"),
        _count("map_slot_millis"),
        _count("reduce_slot_millis"),
        _count("hdfs_bytes_read"),
        _count("hdfs_bytes_written"),
        sa.Column("configuration", _JSON, nullable=True),
        sa.Column("counters", _JSON, nullable=True),
        sa.ForeignKeyConstraint(["flow_id"], ["flow.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("cluster", "job_id", name="uq_job_cluster_job_id"),
    )
    op.create_index(op.f("ix_job_flow_id"), "job", ["flow_id"], unique=False)

    # Create hdfs_stats table
    op.create_table(
        "hdfs_stats",
        sa.Column("cluster", sa.String(length=255), nullable=False),
        sa.Column("path", sa.String(length=4096), nullable=False),
        sa.Column("run_id", sa.BigInteger(), nullable=False),
        sa.Column("attributes", _JSON, nullable=False),
        sa.PrimaryKeyConstraint("cluster", "path", "run_id"),
    )
    op.create_index(
        "ix_hdfs_stats_cluster_run", "hdfs_stats", ["cluster", "run_id"], unique=False
    )


def downgrade() -> None:
    """Drop job history schema."""
    op.drop_index("ix_hdfs_stats_cluster_run", table_name="hdfs_stats")
    op.drop_table("hdfs_stats")
    op.drop_index(op.f("ix_job_flow_id"), table_name="job")
    op.drop_table("job")
    op.drop_index("ix_flow_app_run", table_name="flow")
    op.drop_table("flow")
