"""Flow API: latest flow series and paginated flow statistics."""

import logging
import time
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import (
    get_flow_series_use_case,
    get_flow_stats_page_use_case,
)
from app.application.dtos import FlowSeriesQuery, FlowStatsQuery
from app.application.use_cases.flows import (
    GetFlowSeriesUseCase,
    GetFlowStatsPageUseCase,
)
from app.core.config import get_settings
from app.core.limiter import limit_heavy_queries
from app.schemas.flow import FlowResponse, FlowStatsPageResponse
from app.schemas.serialization import serialize_flow_stats_page, serialize_flows

logger = logging.getLogger(__name__)

router = APIRouter()

IncludeConf = Annotated[
    list[str] | None,
    Query(alias="includeConf", description="Configuration keys to render (exact)"),
]
IncludeConfRegex = Annotated[
    list[str] | None,
    Query(
        alias="includeConfRegex",
        description="Configuration key patterns to render (full match); ignored when includeConf is given",
    ),
]


async def _flow_series(
    use_case: GetFlowSeriesUseCase, query: FlowSeriesQuery
) -> list[FlowResponse]:
    started = time.perf_counter()
    result = await use_case.execute(query)
    logger.info(
        "Fetched %d flows for cluster=%s user=%s appId=%s version=%s in %.1f ms",
        len(result.value),
        query.cluster,
        query.user,
        query.app_id,
        query.version,
        (time.perf_counter() - started) * 1000,
    )
    return serialize_flows(result)


@router.get("/flow/{cluster}/{user}/{app_id}", response_model=list[FlowResponse])
@limit_heavy_queries
async def get_flow_series(
    request: Request,
    cluster: str,
    user: str,
    app_id: str,
    use_case: Annotated[GetFlowSeriesUseCase, Depends(get_flow_series_use_case)],
    limit: int = Query(1, description="Number of most recent flows (at least 1)"),
    include_conf: IncludeConf = None,
    include_conf_regex: IncludeConfRegex = None,
) -> list[FlowResponse]:
    """Return the most recent flows of an app across versions, newest first."""
    query = FlowSeriesQuery(
        cluster=cluster,
        user=user,
        app_id=app_id,
        limit=limit,
        include_config=include_conf or [],
        include_config_regex=include_conf_regex or [],
    )
    return await _flow_series(use_case, query)


@router.get(
    "/flow/{cluster}/{user}/{app_id}/{version}", response_model=list[FlowResponse]
)
@limit_heavy_queries
async def get_flow_series_for_version(
    request: Request,
    cluster: str,
    user: str,
    app_id: str,
    version: str,
    use_case: Annotated[GetFlowSeriesUseCase, Depends(get_flow_series_use_case)],
    limit: int = Query(1, description="Number of most recent flows (at least 1)"),
    include_conf: IncludeConf = None,
    include_conf_regex: IncludeConfRegex = None,
) -> list[FlowResponse]:
    """Return the most recent flows of one app version, newest first."""
    query = FlowSeriesQuery(
        cluster=cluster,
        user=user,
        app_id=app_id,
        version=version,
        limit=limit,
        include_config=include_conf or [],
        include_config_regex=include_conf_regex or [],
    )
    return await _flow_series(use_case, query)


@router.get("/flowStats/{cluster}/{user}/{app_id}", response_model=FlowStatsPageResponse)
@limit_heavy_queries
async def get_flow_stats(
    request: Request,
    cluster: str,
    user: str,
    app_id: str,
    use_case: Annotated[GetFlowStatsPageUseCase, Depends(get_flow_stats_page_use_case)],
    version: str | None = Query(None, description="Restrict to one version"),
    start_cursor: str | None = Query(
        None, alias="startCursor", description="nextCursor of the previous page"
    ),
    start_time: int = Query(0, alias="startTime", description="Earliest run id (epoch seconds)"),
    end_time: int = Query(0, alias="endTime", description="Latest run id; 0 means open"),
    limit: int | None = Query(None, description="Page size (default 100; 0 means maximum)"),
    include_jobs: bool = Query(False, alias="includeJobs"),
) -> FlowStatsPageResponse:
    """Return one page of flow statistics and the cursor for the next page."""
    query = FlowStatsQuery(
        cluster=cluster,
        user=user,
        app_id=app_id,
        version=version,
        start_time=start_time,
        end_time=end_time,
        limit=limit if limit is not None else get_settings().flow_stats_default_limit,
        start_cursor=start_cursor,
        include_jobs=include_jobs,
    )
    started = time.perf_counter()
    result = await use_case.execute(query)
    logger.info(
        "Fetched flow stats page for cluster=%s user=%s appId=%s: %d flows, more=%s in %.1f ms",
        cluster,
        user,
        app_id,
        len(result.value.values),
        result.value.has_next,
        (time.perf_counter() - started) * 1000,
    )
    return serialize_flow_stats_page(result)
