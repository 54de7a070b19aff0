"""HDFS stats use case dependencies (composition root).

Fallback policy and limits come from settings (see app.core.config).
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.application.interfaces.repositories import IHdfsStatsRepository
from app.application.services import RunIdPolicy
from app.application.use_cases.hdfs import (
    GetHdfsPathTimeSeriesUseCase,
    GetHdfsStatsUseCase,
)
from app.core.config import get_settings

from .db import get_hdfs_stats_repo


def get_run_id_policy() -> RunIdPolicy:
    """Bucket stepping policy built from settings."""
    settings = get_settings()
    return RunIdPolicy(
        age_multipliers_days=settings.hdfs_age_multipliers_days,
        lookback_seconds=settings.hdfs_default_lookback_seconds,
    )


async def get_hdfs_stats_use_case(
    hdfs_stats_repo: Annotated[IHdfsStatsRepository, Depends(get_hdfs_stats_repo)],
    run_id_policy: Annotated[RunIdPolicy, Depends(get_run_id_policy)],
) -> GetHdfsStatsUseCase:
    """Snapshot lookup with fallback to older buckets."""
    settings = get_settings()
    return GetHdfsStatsUseCase(
        hdfs_stats_repo=hdfs_stats_repo,
        run_id_policy=run_id_policy,
        max_retries=settings.hdfs_max_retries,
        records_limit=settings.hdfs_records_limit,
    )


async def get_path_time_series_use_case(
    hdfs_stats_repo: Annotated[IHdfsStatsRepository, Depends(get_hdfs_stats_repo)],
) -> GetHdfsPathTimeSeriesUseCase:
    """Single-path attribute time series."""
    settings = get_settings()
    return GetHdfsPathTimeSeriesUseCase(
        hdfs_stats_repo=hdfs_stats_repo,
        records_limit=settings.hdfs_records_limit,
        default_window_days=settings.path_series_default_window_days,
    )
