"""Health check endpoints. Used for liveness and readiness probes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.domain.exceptions import JobHistoryException
from app.infrastructure.persistence.database import check_connection
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Job history store not reachable", "model": ReadinessErrorResponse}},
)
async def readiness_check(request: Request) -> ReadinessResponse | JSONResponse:
    """Return 200 when the job history store answers; 503 otherwise.

    Redis is reported but never fails readiness: without it, reads go
    straight to the database.
    """
    cache = getattr(request.app.state, "cache", None)
    if cache is None:
        cache_status = "disabled"
    else:
        cache_status = "ok" if cache.is_available() else "unavailable"

    try:
        await check_connection()
    except JobHistoryException as e:
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(
                status="not_ready",
                message=e.message,
            ).model_dump(),
        )
    return ReadinessResponse(cache=cache_status)
