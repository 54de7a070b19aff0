"""Job API: single job and the flow around a job."""

import logging
import time
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import get_job_flow_use_case, get_job_use_case
from app.application.use_cases.jobs import GetJobFlowUseCase, GetJobUseCase
from app.core.limiter import limit_queries
from app.schemas.flow import FlowResponse
from app.schemas.job import JobResponse
from app.schemas.serialization import serialize_flow, serialize_job

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/job/{cluster}/{job_id}", response_model=JobResponse)
@limit_queries
async def get_job(
    request: Request,
    cluster: str,
    job_id: str,
    use_case: Annotated[GetJobUseCase, Depends(get_job_use_case)],
) -> JobResponse:
    """Return one job with configuration and counters; 404 if unknown."""
    started = time.perf_counter()
    result = await use_case.execute(cluster, job_id)
    logger.info(
        "Fetched job cluster=%s jobId=%s in %.1f ms",
        cluster,
        job_id,
        (time.perf_counter() - started) * 1000,
    )
    return serialize_job(result.value, result.context)


@router.get("/jobFlow/{cluster}/{job_id}", response_model=FlowResponse)
@limit_queries
async def get_job_flow(
    request: Request,
    cluster: str,
    job_id: str,
    use_case: Annotated[GetJobFlowUseCase, Depends(get_job_flow_use_case)],
) -> FlowResponse:
    """Return the flow containing the job, with all of its jobs; 404 if unknown."""
    started = time.perf_counter()
    result = await use_case.execute(cluster, job_id)
    logger.info(
        "Fetched flow for cluster=%s jobId=%s in %.1f ms",
        cluster,
        job_id,
        (time.perf_counter() - started) * 1000,
    )
    return serialize_flow(result.value, result.context)
