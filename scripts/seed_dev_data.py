"""Seed a development job history store with synthetic flows, jobs and HDFS snapshots.

Writes a few days of runs for two sample apps (two versions each) and
directory snapshots every six hours for a handful of paths, so every query
route returns data. Rows whose key already exists are skipped, so the
script can be re-run.

Usage:
    python -m scripts.seed_dev_data [days]

Default: 10 days back from now. Requires DATABASE_URL and a migrated
schema (alembic upgrade head).
"""

from __future__ import annotations

import asyncio
import sys
import time
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services.run_id_policy import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    hour_bucket,
)
from app.core.config import get_settings
from app.infrastructure.persistence import database
from app.infrastructure.persistence.models import FlowRecord, HdfsStatsRecord, JobRecord

CLUSTER = "cluster1@dc1"
APPS = (
    ("alice", "wordcount", ("v1", "v2")),
    ("bob", "pagerank", ("2024.1", "2024.2")),
)
PATHS = ("/user/alice", "/user/bob", "/tmp", "/data/warehouse")
JOBS_PER_FLOW = 3


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def _flow_exists(
    session: AsyncSession, user: str, app_id: str, version: str, run_id: int
) -> bool:
    result = await session.execute(
        select(FlowRecord.id).where(
            FlowRecord.cluster == CLUSTER,
            FlowRecord.user_name == user,
            FlowRecord.app_id == app_id,
            FlowRecord.version == version,
            FlowRecord.run_id == run_id,
        )
    )
    return result.first() is not None


async def _seed_flow(
    session: AsyncSession, user: str, app_id: str, version: str, run_id: int
) -> None:
    start_ms = run_id * 1000
    jobs: list[JobRecord] = []
    for step in range(JOBS_PER_FLOW):
        launch = start_ms + 1_000 + step * 120_000
        maps, reduces = 20 + step, 4
        jobs.append(
            JobRecord(
                cluster=CLUSTER,
                job_id=f"job_{run_id}_{app_id}_{step:04d}",
                job_name=f"{app_id} step {step}",
                user=user,
                priority="NORMAL",
                status="SUCCEEDED",
                submit_time=launch - 500,
                launch_time=launch,
                finish_time=launch + 110_000,
                total_maps=maps,
                total_reduces=reduces,
                finished_maps=maps,
                finished_reduces=reduces,
                map_slot_millis=maps * 30_000,
                reduce_slot_millis=reduces * 45_000,
                hdfs_bytes_read=maps * 64 * 1024 * 1024,
                hdfs_bytes_written=reduces * 8 * 1024 * 1024,
                configuration={
                    "mapreduce.job.queuename": "default",
                    "mapreduce.map.memory.mb": "2048",
                    "batch.desc": f"{app_id} {version}",
                },
                counters={
                    "MAP_INPUT_RECORDS": maps * 1000,
                    "REDUCE_OUTPUT_RECORDS": reduces * 10,
                },
            )
        )
    flow = FlowRecord(
        cluster=CLUSTER,
        user_name=user,
        app_id=app_id,
        version=version,
        run_id=run_id,
        flow_name=f"{app_id} nightly",
        queue="default",
        job_count=len(jobs),
        total_maps=sum(j.total_maps for j in jobs),
        total_reduces=sum(j.total_reduces for j in jobs),
        map_slot_millis=sum(j.map_slot_millis for j in jobs),
        reduce_slot_millis=sum(j.reduce_slot_millis for j in jobs),
        hdfs_bytes_read=sum(j.hdfs_bytes_read for j in jobs),
        hdfs_bytes_written=sum(j.hdfs_bytes_written for j in jobs),
        submit_time=jobs[0].submit_time,
        launch_time=jobs[0].launch_time,
        finish_time=jobs[-1].finish_time,
    )
    session.add(flow)
    await session.flush()
    for job in jobs:
        job.flow_id = flow.id
        session.add(job)


async def run(days: int) -> None:
    _load_env()
    get_settings.cache_clear()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("DATABASE_URL is not set; nothing to seed.", file=sys.stderr)
        sys.exit(1)

    now = int(time.time())
    flows = snapshots = 0
    async with database.AsyncSessionLocal() as session:
        for user, app_id, versions in APPS:
            for day in range(days):
                # Older half of the window ran the first version.
                version = versions[0] if day >= days // 2 else versions[1]
                run_id = now - day * SECONDS_PER_DAY - 3 * SECONDS_PER_HOUR
                if await _flow_exists(session, user, app_id, version, run_id):
                    continue
                await _seed_flow(session, user, app_id, version, run_id)
                flows += 1

        # Newest two hours are left empty, as collection lag leaves them in production.
        first_bucket = hour_bucket(now) - 2 * SECONDS_PER_HOUR
        for hours_back in range(0, days * 24, 6):
            bucket = first_bucket - hours_back * SECONDS_PER_HOUR
            for i, path in enumerate(PATHS):
                if await session.get(HdfsStatsRecord, (CLUSTER, path, bucket)) is not None:
                    continue
                session.add(
                    HdfsStatsRecord(
                        cluster=CLUSTER,
                        path=path,
                        run_id=bucket,
                        attributes={
                            "fileCount": 1_000 * (i + 1) + hours_back,
                            "dirCount": 10 * (i + 1),
                            "spaceConsumed": (i + 1) * 1024**3 + hours_back * 1024**2,
                            "quota": 10 * 1024**4,
                        },
                    )
                )
                snapshots += 1
        await session.commit()

    print(f"Seed completed: {flows} flows, {snapshots} hdfs snapshots.")
    await database.engine.dispose()


def main() -> None:
    days = int(sys.argv[1]) if len(sys.argv) > 1 else 10
    asyncio.run(run(days))


if __name__ == "__main__":
    main()
