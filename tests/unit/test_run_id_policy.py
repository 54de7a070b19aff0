"""Tests for RunIdPolicy and hour_bucket."""

import pytest

from app.application.services import RunIdPolicy, hour_bucket


def test_default_run_id_is_lookback_behind_now() -> None:
    policy = RunIdPolicy([1, 2, 7], lookback_seconds=7200)
    assert policy.default_run_id(1_700_000_000.9) == 1_700_000_000 - 7200


def test_older_run_id_is_strictly_older_each_attempt() -> None:
    policy = RunIdPolicy([1, 2, 7])
    run_id = 1_700_000_000
    for attempt in range(policy.max_attempts):
        older = policy.older_run_id(attempt, run_id)
        assert older < run_id
        run_id = older
    assert run_id == 1_700_000_000 - 10 * 86400


def test_older_run_id_beyond_multipliers_raises() -> None:
    policy = RunIdPolicy([1, 2])
    with pytest.raises(ValueError, match="look back"):
        policy.older_run_id(2, 1_700_000_000)


def test_non_positive_multiplier_rejected() -> None:
    with pytest.raises(ValueError):
        RunIdPolicy([1, 0, 7])


@pytest.mark.parametrize(
    ("run_id", "bucket"),
    [(1_700_002_800, 1_700_002_800), (1_700_002_801, 1_700_002_800), (1_700_006_399, 1_700_002_800)],
)
def test_hour_bucket(run_id: int, bucket: int) -> None:
    assert hour_bucket(run_id) == bucket
