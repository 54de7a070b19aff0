"""Run id (hourly bucket) policy for HDFS snapshot queries.

Snapshots are written into hourly buckets keyed by run id (seconds since
epoch). The most recent buckets are often incomplete because collection
lags, so the default bucket sits a fixed lookback behind now, and older
buckets are proposed when the default one is empty.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)

SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400


class RunIdPolicy:
    """Deterministic bucket stepping: each attempt moves strictly older."""

    def __init__(
        self,
        age_multipliers_days: Sequence[int],
        lookback_seconds: int = 2 * SECONDS_PER_HOUR,
    ) -> None:
        """Initialize the policy.

        Args:
            age_multipliers_days: Days to step back on attempt i; all must be positive.
            lookback_seconds: Distance behind now of the default bucket.

        Raises:
            ValueError: If any multiplier is not positive.
        """
        if any(m <= 0 for m in age_multipliers_days):
            raise ValueError("age multipliers must be positive")
        self.age_multipliers_days = tuple(age_multipliers_days)
        self.lookback_seconds = lookback_seconds

    @property
    def max_attempts(self) -> int:
        return len(self.age_multipliers_days)

    def default_run_id(self, now: float) -> int:
        """Return the default bucket for a request made at now (epoch seconds)."""
        return int(now) - self.lookback_seconds

    def older_run_id(self, attempt: int, run_id: int) -> int:
        """Return a candidate bucket older than run_id for the given attempt.

        Raises:
            ValueError: If attempt is beyond the configured multipliers.
        """
        if attempt < 0 or attempt >= self.max_attempts:
            raise ValueError(
                f"Can't look back in time that far: attempt {attempt}, "
                f"allowed up to {self.max_attempts - 1}"
            )
        older = run_id - self.age_multipliers_days[attempt] * SECONDS_PER_DAY
        logger.debug(
            "Older run id for %d on attempt %d: %d (%d days back)",
            run_id,
            attempt,
            older,
            self.age_multipliers_days[attempt],
        )
        return older


def hour_bucket(run_id: int) -> int:
    """Truncate a run id to the top of its hour."""
    return run_id - (run_id % SECONDS_PER_HOUR)
