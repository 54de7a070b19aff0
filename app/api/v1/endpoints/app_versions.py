"""App version API: distinct versions of an application."""

import logging
import time
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import get_app_versions_use_case
from app.application.use_cases.jobs import GetAppVersionsUseCase
from app.core.limiter import limit_queries
from app.schemas.app_version import VersionInfoResponse
from app.schemas.serialization import serialize_versions

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/appVersion/{cluster}/{user}/{app_id}", response_model=list[VersionInfoResponse])
@limit_queries
async def get_app_versions(
    request: Request,
    cluster: str,
    user: str,
    app_id: str,
    use_case: Annotated[GetAppVersionsUseCase, Depends(get_app_versions_use_case)],
    limit: int = Query(0, description="Keep only the newest N versions (0 = all)"),
) -> list[VersionInfoResponse]:
    """Return versions of the app, most recently run first."""
    started = time.perf_counter()
    versions = await use_case.execute(cluster, user, app_id, limit=limit)
    logger.info(
        "Fetched %d versions for cluster=%s user=%s appId=%s in %.1f ms",
        len(versions),
        cluster,
        user,
        app_id,
        (time.perf_counter() - started) * 1000,
    )
    return serialize_versions(versions)
