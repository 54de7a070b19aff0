"""Tests for GetHdfsStatsUseCase (bucket lookup with fallback to older buckets)."""

from unittest.mock import AsyncMock

import pytest

from app.application.dtos import HdfsStatsQuery
from app.application.services import RunIdPolicy
from app.application.use_cases.hdfs import GetHdfsStatsUseCase
from app.domain.entities import HdfsStats
from app.domain.exceptions import StorageUnavailableException, ValidationException
from tests.conftest import CLUSTER, FakeHdfsStatsRepository

DAY = 86400
NOW = 1_700_006_400  # top of an hour
DEFAULT_RUN = NOW - 7200


def _use_case(repo, max_retries: int = 3, records_limit: int = 1000) -> GetHdfsStatsUseCase:
    return GetHdfsStatsUseCase(
        hdfs_stats_repo=repo,
        run_id_policy=RunIdPolicy([1, 2, 7], lookback_seconds=7200),
        max_retries=max_retries,
        records_limit=records_limit,
        clock=lambda: float(NOW),
    )


def _stats(run_id: int, path: str = "/user/alice") -> HdfsStats:
    return HdfsStats(CLUSTER, path, run_id, {"fileCount": 3, "spaceConsumed": 4096})


async def test_explicit_run_id_reads_exactly_one_bucket() -> None:
    """An explicit run id is looked up once; an empty answer stands."""
    repo = FakeHdfsStatsRepository([_stats(DEFAULT_RUN - DAY)])
    result = await _use_case(repo).execute(HdfsStatsQuery(cluster=CLUSTER, run_id=DEFAULT_RUN))
    assert result.value == []
    assert repo.lookups == [DEFAULT_RUN]


async def test_implicit_run_id_steps_back_through_older_buckets() -> None:
    """Empty default bucket: B0, B0-1d, B0-3d, B0-10d are tried in that order."""
    repo = FakeHdfsStatsRepository()
    result = await _use_case(repo).execute(HdfsStatsQuery(cluster=CLUSTER))
    assert result.value == []
    assert repo.lookups == [
        DEFAULT_RUN,
        DEFAULT_RUN - DAY,
        DEFAULT_RUN - 3 * DAY,
        DEFAULT_RUN - 10 * DAY,
    ]


async def test_first_non_empty_bucket_wins() -> None:
    older = DEFAULT_RUN - 3 * DAY
    repo = FakeHdfsStatsRepository([_stats(older), _stats(DEFAULT_RUN - 10 * DAY, "/tmp")])
    result = await _use_case(repo).execute(HdfsStatsQuery(cluster=CLUSTER))
    assert [s.run_id for s in result.value] == [older]
    assert len(repo.lookups) == 3


async def test_non_empty_default_bucket_needs_no_fallback() -> None:
    repo = FakeHdfsStatsRepository([_stats(DEFAULT_RUN)])
    result = await _use_case(repo).execute(HdfsStatsQuery(cluster=CLUSTER))
    assert len(result.value) == 1
    assert repo.lookups == [DEFAULT_RUN]


async def test_zero_retries_reads_default_bucket_only() -> None:
    repo = FakeHdfsStatsRepository()
    await _use_case(repo, max_retries=0).execute(HdfsStatsQuery(cluster=CLUSTER))
    assert repo.lookups == [DEFAULT_RUN]


async def test_zero_limit_uses_records_limit() -> None:
    repo = AsyncMock()
    repo.lookup_bucket.return_value = [_stats(DEFAULT_RUN)]
    await _use_case(repo, records_limit=25).execute(HdfsStatsQuery(cluster=CLUSTER))
    assert repo.lookup_bucket.await_args.kwargs["limit"] == 25


async def test_explicit_limit_and_prefix_are_passed_through() -> None:
    repo = AsyncMock()
    repo.lookup_bucket.return_value = []
    await _use_case(repo).execute(
        HdfsStatsQuery(cluster=CLUSTER, path_prefix="/user", run_id=DEFAULT_RUN, limit=5)
    )
    repo.lookup_bucket.assert_awaited_once_with(
        cluster=CLUSTER, path_prefix="/user", run_id=DEFAULT_RUN, limit=5
    )


async def test_storage_failure_is_not_retried() -> None:
    repo = AsyncMock()
    repo.lookup_bucket.side_effect = StorageUnavailableException("lookup_bucket")
    with pytest.raises(StorageUnavailableException):
        await _use_case(repo).execute(HdfsStatsQuery(cluster=CLUSTER))
    assert repo.lookup_bucket.await_count == 1


def test_max_retries_beyond_policy_is_rejected() -> None:
    with pytest.raises(ValueError, match="max_retries"):
        _use_case(FakeHdfsStatsRepository(), max_retries=4)


@pytest.mark.parametrize("run_id", [0, DEFAULT_RUN])
async def test_negative_limit_is_rejected_before_lookup(run_id) -> None:
    repo = FakeHdfsStatsRepository([_stats(DEFAULT_RUN)])
    with pytest.raises(ValidationException) as exc_info:
        await _use_case(repo).execute(HdfsStatsQuery(cluster=CLUSTER, run_id=run_id, limit=-1))
    assert exc_info.value.details == {"field": "limit"}
    assert repo.lookups == []
