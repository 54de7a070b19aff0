"""HDFS stats API: directory snapshots per bucket and per-path time series."""

import logging
import time
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import (
    get_hdfs_stats_use_case,
    get_path_time_series_use_case,
)
from app.application.dtos import HdfsStatsQuery, PathSeriesQuery
from app.application.use_cases.hdfs import (
    GetHdfsPathTimeSeriesUseCase,
    GetHdfsStatsUseCase,
)
from app.core.limiter import limit_queries
from app.schemas.hdfs import HdfsStatsResponse
from app.schemas.serialization import serialize_hdfs_stats

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/hdfs/path/{cluster}/{attribute}", response_model=list[HdfsStatsResponse])
@limit_queries
async def get_path_time_series(
    request: Request,
    cluster: str,
    attribute: str,
    use_case: Annotated[
        GetHdfsPathTimeSeriesUseCase, Depends(get_path_time_series_use_case)
    ],
    path: str | None = Query(None, description="Directory path (required)"),
    start_time: int = Query(0, alias="starttime", description="Newest run id; 0 means now"),
    end_time: int = Query(0, alias="endtime", description="Oldest run id (exclusive); 0 means 7 days ago"),
    limit: int = Query(0, description="Row limit (non-negative); 0 uses the service default"),
) -> list[HdfsStatsResponse]:
    """Return snapshots of one path, newest first, rendering only attribute."""
    query = PathSeriesQuery(
        cluster=cluster,
        attribute=attribute,
        path=path,
        start_time=start_time,
        end_time=end_time,
        limit=limit,
    )
    started = time.perf_counter()
    result = await use_case.execute(query)
    logger.info(
        "Fetched %d snapshots for cluster=%s path=%s attribute=%s in %.1f ms",
        len(result.value),
        cluster,
        path,
        attribute,
        (time.perf_counter() - started) * 1000,
    )
    return serialize_hdfs_stats(result)


@router.get("/hdfs/{cluster}", response_model=list[HdfsStatsResponse])
@limit_queries
async def get_hdfs_stats(
    request: Request,
    cluster: str,
    use_case: Annotated[GetHdfsStatsUseCase, Depends(get_hdfs_stats_use_case)],
    run_id: int = Query(0, alias="runid", description="Bucket (epoch seconds); 0 means latest complete"),
    path: str | None = Query(None, description="Only paths starting with this prefix"),
    limit: int = Query(0, description="Row limit (non-negative); 0 uses the service default"),
) -> list[HdfsStatsResponse]:
    """Return directory snapshots of a single hourly bucket."""
    query = HdfsStatsQuery(cluster=cluster, path_prefix=path, run_id=run_id, limit=limit)
    started = time.perf_counter()
    result = await use_case.execute(query)
    logger.info(
        "Fetched %d snapshots for cluster=%s runId=%d path=%s in %.1f ms",
        len(result.value),
        cluster,
        run_id,
        path,
        (time.perf_counter() - started) * 1000,
    )
    return serialize_hdfs_stats(result)
