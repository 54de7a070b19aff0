"""Tests for flow series and flow stats endpoints (in-memory repositories)."""

import base64

import pytest
from httpx import AsyncClient

from app.application.services import FlowKeyConverter
from app.domain.value_objects import FlowKey
from tests.conftest import APP_ID, CLUSTER, USER, make_flow

pytestmark = pytest.mark.usefixtures("override_repositories")

STATS_URL = f"/api/v1/flowStats/{CLUSTER}/{USER}/{APP_ID}"


@pytest.fixture(autouse=True)
def seed(job_history_repo) -> None:
    job_history_repo.flows[:] = sorted(
        [
            make_flow("v1", 100, job_ids=("job_a",)),
            make_flow("v1", 200, job_ids=("job_b",)),
            make_flow("v2", 150, job_ids=("job_c",)),
            make_flow("v2", 250, job_ids=("job_d",)),
            make_flow("v2", 350, job_ids=("job_e",)),
        ],
        key=lambda f: f.flow_key,
    )


async def test_flow_series_defaults_to_latest_flow(client: AsyncClient) -> None:
    response = await client.get(f"/api/v1/flow/{CLUSTER}/{USER}/{APP_ID}")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 1
    assert data[0]["runId"] == 350
    assert "configuration" in data[0]["jobs"][0]


async def test_flow_series_for_version(client: AsyncClient) -> None:
    response = await client.get(f"/api/v1/flow/{CLUSTER}/{USER}/{APP_ID}/v1?limit=5")
    assert [f["runId"] for f in response.json()] == [200, 100]


async def test_flow_series_include_conf(client: AsyncClient) -> None:
    response = await client.get(
        f"/api/v1/flow/{CLUSTER}/{USER}/{APP_ID}",
        params={"includeConf": "batch.desc", "includeConfRegex": ".*"},
    )
    assert response.json()[0]["jobs"][0]["configuration"] == {"batch.desc": "nightly"}


async def test_flow_series_include_conf_regex(client: AsyncClient) -> None:
    response = await client.get(
        f"/api/v1/flow/{CLUSTER}/{USER}/{APP_ID}",
        params=[("includeConfRegex", r"mapreduce\..*")],
    )
    conf = response.json()[0]["jobs"][0]["configuration"]
    assert set(conf) == {"mapreduce.job.queuename", "mapreduce.map.memory.mb"}


async def test_flow_series_bad_regex_returns_400(client: AsyncClient) -> None:
    response = await client.get(
        f"/api/v1/flow/{CLUSTER}/{USER}/{APP_ID}", params={"includeConfRegex": "("}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_flow_stats_pages_through_all_flows(client: AsyncClient) -> None:
    seen: list[tuple[str, int]] = []
    cursor = None
    for _ in range(5):
        params = {"limit": 2}
        if cursor:
            params["startCursor"] = cursor
        response = await client.get(STATS_URL, params=params)
        assert response.status_code == 200
        data = response.json()
        seen.extend((f["version"], f["runId"]) for f in data["values"])
        cursor = data["nextCursor"]
        if cursor is None:
            break
    assert seen == [("v1", 100), ("v1", 200), ("v2", 150), ("v2", 250), ("v2", 350)]


async def test_flow_stats_summary_has_no_jobs(client: AsyncClient) -> None:
    data = (await client.get(STATS_URL)).json()
    assert data["limit"] == 100
    assert data["nextCursor"] is None
    assert all("jobs" not in f for f in data["values"])
    assert data["requestParameters"]["includeJobs"] == "false"


async def test_flow_stats_include_jobs_renders_job_stats_only(client: AsyncClient) -> None:
    data = (await client.get(STATS_URL, params={"includeJobs": "true"})).json()
    job = data["values"][0]["jobs"][0]
    assert job["jobId"] == "job_a"
    assert "configuration" not in job
    assert "counters" not in job


async def test_flow_stats_invalid_cursor_returns_400(
    client: AsyncClient, job_history_repo
) -> None:
    response = await client.get(STATS_URL, params={"startCursor": "@@@"})
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_CURSOR"
    assert job_history_repo.scan_calls == []


async def test_flow_stats_foreign_cursor_returns_400(client: AsyncClient) -> None:
    cursor = FlowKeyConverter().encode_cursor(FlowKey(CLUSTER, "bob", APP_ID, "v1", 1))
    response = await client.get(STATS_URL, params={"startCursor": cursor})
    assert response.status_code == 400


async def test_flow_stats_time_window(client: AsyncClient) -> None:
    data = (
        await client.get(STATS_URL, params={"startTime": 150, "endTime": 250, "version": "v2"})
    ).json()
    assert [f["runId"] for f in data["values"]] == [150, 250]
    assert data["requestParameters"]["version"] == "v2"
    assert data["requestParameters"]["endTime"] == "250"


async def test_flow_stats_next_cursor_decodes_to_sentinel(client: AsyncClient) -> None:
    data = (await client.get(STATS_URL, params={"limit": 3})).json()
    raw = base64.b64decode(data["nextCursor"])
    assert FlowKeyConverter().from_bytes(raw) == FlowKey(CLUSTER, USER, APP_ID, "v2", 250)
