"""Tests for response serialization by detail level."""

import base64

from app.application.dtos import PaginatedResult, Projection, SerializationContext
from app.application.services import ConfigurationFilter
from app.domain.entities import HdfsStats
from app.domain.enums import DetailLevel
from app.schemas.serialization import (
    serialize_flow,
    serialize_flow_stats_page,
    serialize_hdfs_stats,
    serialize_job,
)
from tests.conftest import make_flow


def _dump(model) -> dict:
    return model.model_dump(mode="json", by_alias=True)


def test_job_everything_renders_configuration_and_counters() -> None:
    job = make_flow("v1", 100, job_ids=("job_1",)).jobs[0]
    data = _dump(serialize_job(job, SerializationContext()))
    assert data["jobId"] == "job_1"
    assert data["runTime"] == 60_000
    assert data["counters"] == {"FILE_BYTES_READ": 1024, "MAP_INPUT_RECORDS": 50}
    assert "mapreduce.job.queuename" in data["configuration"]


def test_job_configuration_is_filtered() -> None:
    job = make_flow("v1", 100, job_ids=("job_1",)).jobs[0]
    context = SerializationContext(key_filter=ConfigurationFilter(["batch.desc"]))
    data = _dump(serialize_job(job, context))
    assert data["configuration"] == {"batch.desc": "nightly"}


def test_summary_only_flow_has_no_jobs_key() -> None:
    flow = make_flow("v1", 100, job_ids=("job_1", "job_2"))
    context = SerializationContext(DetailLevel.FLOW_SUMMARY_STATS_ONLY)
    data = _dump(serialize_flow(flow, context))
    assert "jobs" not in data
    assert data["jobCount"] == 2
    assert data["duration"] == 90_000


def test_job_stats_flow_omits_configuration_and_counters() -> None:
    flow = make_flow("v1", 100, job_ids=("job_1",))
    context = SerializationContext(DetailLevel.FLOW_SUMMARY_STATS_WITH_JOB_STATS)
    job = _dump(serialize_flow(flow, context))["jobs"][0]
    assert "configuration" not in job
    assert "counters" not in job
    assert job["totalMaps"] == 10


def test_flow_stats_page_keeps_null_next_cursor() -> None:
    page = PaginatedResult(limit=10, values=[make_flow("v1", 1)])
    data = _dump(serialize_flow_stats_page(Projection(page)))
    assert data["nextCursor"] is None
    assert data["limit"] == 10


def test_flow_stats_page_next_cursor_is_base64() -> None:
    page = PaginatedResult(limit=1, values=[make_flow("v1", 1)], next_cursor=b"\x01abc")
    data = _dump(serialize_flow_stats_page(Projection(page)))
    assert base64.b64decode(data["nextCursor"]) == b"\x01abc"


def test_hdfs_attributes_are_filtered() -> None:
    stats = [HdfsStats("c1", "/user", 3600, {"fileCount": 3, "dirCount": 1})]
    context = SerializationContext(key_filter=ConfigurationFilter(["dirCount"]))
    data = [_dump(r) for r in serialize_hdfs_stats(Projection(stats, context))]
    assert data == [{"cluster": "c1", "path": "/user", "runId": 3600, "attributes": {"dirCount": 1}}]
