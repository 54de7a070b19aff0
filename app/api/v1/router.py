"""API v1 router aggregation.

Includes all endpoint modules with consistent tags. All routes use
dependencies from app.api.v1.dependencies (no manual repo/service construction).
Query routes keep the path shapes existing job history clients use.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import app_versions, flows, hdfs, health, jobs

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(jobs.router, tags=["jobs"])
api_router.include_router(flows.router, tags=["flows"])
api_router.include_router(app_versions.router, tags=["app-versions"])
api_router.include_router(hdfs.router, tags=["hdfs"])
