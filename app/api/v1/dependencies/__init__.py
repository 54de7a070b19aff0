"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for repositories and application use cases.
All use cases are built from infrastructure implementations here;
routes depend only on these dependencies, not on infra directly.
Tests swap repositories via app.dependency_overrides.
"""

from .common import get_cache
from .db import get_app_version_repo, get_hdfs_stats_repo, get_job_history_repo
from .flow import (
    get_flow_key_converter,
    get_flow_series_use_case,
    get_flow_stats_page_use_case,
)
from .hdfs import (
    get_hdfs_stats_use_case,
    get_path_time_series_use_case,
    get_run_id_policy,
)
from .job import get_app_versions_use_case, get_job_flow_use_case, get_job_use_case

__all__ = [
    "get_app_version_repo",
    "get_app_versions_use_case",
    "get_cache",
    "get_flow_key_converter",
    "get_flow_series_use_case",
    "get_flow_stats_page_use_case",
    "get_hdfs_stats_repo",
    "get_hdfs_stats_use_case",
    "get_job_flow_use_case",
    "get_job_history_repo",
    "get_job_use_case",
    "get_path_time_series_use_case",
    "get_run_id_policy",
]
