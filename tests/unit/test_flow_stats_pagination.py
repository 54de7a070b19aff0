"""Tests for GetFlowStatsPageUseCase (cursor pagination over flow statistics)."""

from unittest.mock import AsyncMock

import pytest

from app.application.dtos import FlowStatsQuery
from app.application.services import FlowKeyConverter
from app.application.use_cases.flows import (
    MAX_LIMIT,
    MAX_TIMESTAMP,
    GetFlowStatsPageUseCase,
    normalize_limit,
)
from app.domain.enums import DetailLevel
from app.domain.exceptions import InvalidCursorException
from app.domain.value_objects import FlowKey
from tests.conftest import APP_ID, CLUSTER, USER, FakeJobHistoryRepository, make_flow

codec = FlowKeyConverter()


def _query(**kwargs) -> FlowStatsQuery:
    return FlowStatsQuery(cluster=CLUSTER, user=USER, app_id=APP_ID, **kwargs)


def _cursor(page) -> str | None:
    if page.next_cursor is None:
        return None
    return codec.encode_cursor(codec.from_bytes(page.next_cursor))


@pytest.fixture
def five_flows() -> FakeJobHistoryRepository:
    """Five flows k1..k5 in key order: two of v1, three of v2."""
    return FakeJobHistoryRepository(
        [
            make_flow("v1", 100),
            make_flow("v1", 200),
            make_flow("v2", 150),
            make_flow("v2", 250),
            make_flow("v2", 350),
        ]
    )


async def test_pages_walk_all_flows_without_overlap(five_flows) -> None:
    """limit 2 over k1..k5: [k1,k2] -> [k3,k4] -> [k5], cursors k3, k5, none."""
    use_case = GetFlowStatsPageUseCase(five_flows, codec)
    keys = [f.flow_key for f in five_flows.flows]

    first = (await use_case.execute(_query(limit=2))).value
    assert [f.flow_key for f in first.values] == keys[0:2]
    assert codec.from_bytes(first.next_cursor) == keys[2]

    second = (await use_case.execute(_query(limit=2, start_cursor=_cursor(first)))).value
    assert [f.flow_key for f in second.values] == keys[2:4]
    assert codec.from_bytes(second.next_cursor) == keys[4]

    third = (await use_case.execute(_query(limit=2, start_cursor=_cursor(second)))).value
    assert [f.flow_key for f in third.values] == keys[4:5]
    assert third.next_cursor is None


async def test_repository_asked_for_one_extra_row(five_flows) -> None:
    use_case = GetFlowStatsPageUseCase(five_flows, codec)
    await use_case.execute(_query(limit=2))
    assert five_flows.scan_calls[0]["limit"] == 3


async def test_exactly_limit_rows_has_no_next_cursor() -> None:
    repo = FakeJobHistoryRepository([make_flow("v1", 1), make_flow("v1", 2)])
    page = (await GetFlowStatsPageUseCase(repo, codec).execute(_query(limit=2))).value
    assert len(page.values) == 2
    assert page.next_cursor is None


async def test_empty_scan_returns_empty_page() -> None:
    page = (
        await GetFlowStatsPageUseCase(FakeJobHistoryRepository(), codec).execute(_query())
    ).value
    assert page.values == []
    assert page.next_cursor is None


@pytest.mark.parametrize(
    ("requested", "expected"),
    [(0, MAX_LIMIT - 1), (MAX_LIMIT, MAX_LIMIT - 1), (MAX_LIMIT + 10, MAX_LIMIT - 1), (-5, 1), (1, 1), (100, 100)],
)
def test_normalize_limit(requested: int, expected: int) -> None:
    assert normalize_limit(requested) == expected


async def test_zero_and_max_limit_scan_identically(five_flows) -> None:
    use_case = GetFlowStatsPageUseCase(five_flows, codec)
    a = (await use_case.execute(_query(limit=0))).value
    b = (await use_case.execute(_query(limit=MAX_LIMIT))).value
    assert a.limit == b.limit == MAX_LIMIT - 1
    assert [f.flow_key for f in a.values] == [f.flow_key for f in b.values]
    assert five_flows.scan_calls[0]["limit"] == five_flows.scan_calls[1]["limit"] == MAX_LIMIT


async def test_open_end_time_becomes_max_timestamp(five_flows) -> None:
    use_case = GetFlowStatsPageUseCase(five_flows, codec)
    page = (await use_case.execute(_query(start_time=150, end_time=0))).value
    assert five_flows.scan_calls[0]["end_time"] == MAX_TIMESTAMP
    assert [f.run_id for f in page.values] == [200, 150, 250, 350]


async def test_time_window_is_inclusive(five_flows) -> None:
    use_case = GetFlowStatsPageUseCase(five_flows, codec)
    page = (await use_case.execute(_query(start_time=150, end_time=250))).value
    assert sorted(f.run_id for f in page.values) == [150, 200, 250]


async def test_version_restricts_scan(five_flows) -> None:
    use_case = GetFlowStatsPageUseCase(five_flows, codec)
    page = (await use_case.execute(_query(version="v2", limit=2))).value
    assert [f.run_id for f in page.values] == [150, 250]
    assert codec.from_bytes(page.next_cursor).run_id == 350


async def test_blank_version_means_all_versions(five_flows) -> None:
    use_case = GetFlowStatsPageUseCase(five_flows, codec)
    page = (await use_case.execute(_query(version="  "))).value
    assert len(page.values) == 5
    assert page.request_parameters["version"] == "all"


async def test_malformed_cursor_never_reaches_storage() -> None:
    repo = AsyncMock()
    use_case = GetFlowStatsPageUseCase(repo, codec)
    with pytest.raises(InvalidCursorException) as exc_info:
        await use_case.execute(_query(start_cursor="%%%not-a-cursor%%%"))
    assert exc_info.value.error_code == "INVALID_CURSOR"
    repo.scan_flow_stats.assert_not_awaited()


async def test_cursor_from_other_app_is_rejected() -> None:
    repo = AsyncMock()
    foreign = codec.encode_cursor(FlowKey(CLUSTER, USER, "other-app", "v1", 1))
    with pytest.raises(InvalidCursorException, match="different flow scope"):
        await GetFlowStatsPageUseCase(repo, codec).execute(_query(start_cursor=foreign))
    repo.scan_flow_stats.assert_not_awaited()


async def test_cursor_from_other_version_is_rejected() -> None:
    repo = AsyncMock()
    cursor = codec.encode_cursor(FlowKey(CLUSTER, USER, APP_ID, "v1", 1))
    with pytest.raises(InvalidCursorException):
        await GetFlowStatsPageUseCase(repo, codec).execute(
            _query(version="v2", start_cursor=cursor)
        )


async def test_request_parameters_echo_normalized_values(five_flows) -> None:
    use_case = GetFlowStatsPageUseCase(five_flows, codec)
    page = (await use_case.execute(_query(limit=0, start_time=10, include_jobs=True))).value
    assert page.request_parameters == {
        "cluster": CLUSTER,
        "user": USER,
        "appId": APP_ID,
        "version": "all",
        "startTime": "10",
        "endTime": str(MAX_TIMESTAMP),
        "limit": str(MAX_LIMIT - 1),
        "includeJobs": "true",
    }


async def test_detail_level_follows_include_jobs(five_flows) -> None:
    use_case = GetFlowStatsPageUseCase(five_flows, codec)
    without = await use_case.execute(_query())
    with_jobs = await use_case.execute(_query(include_jobs=True))
    assert without.context.detail_level == DetailLevel.FLOW_SUMMARY_STATS_ONLY
    assert with_jobs.context.detail_level == DetailLevel.FLOW_SUMMARY_STATS_WITH_JOB_STATS
