"""HDFS stats use case: directory snapshots for one hourly bucket.

When the caller names a bucket (run id), exactly that bucket is read and
an empty answer stands. When the caller leaves it out, the default bucket
sits a lookback behind now; if collection lag left it empty, older
buckets are tried one at a time, up to max_retries, and the first
non-empty bucket wins. Rows from different buckets are never mixed.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from app.application.dtos.queries import HdfsStatsQuery
from app.application.dtos.serialization import Projection, SerializationContext
from app.application.interfaces.repositories import IHdfsStatsRepository
from app.application.interfaces.services import IRunIdPolicy
from app.domain.entities import HdfsStats
from app.domain.exceptions import ValidationException
from app.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)


class GetHdfsStatsUseCase:
    """Resolves a snapshot query, falling back to older buckets for implicit run ids."""

    def __init__(
        self,
        hdfs_stats_repo: IHdfsStatsRepository,
        run_id_policy: IRunIdPolicy,
        max_retries: int,
        records_limit: int,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the use case.

        Args:
            hdfs_stats_repo: Snapshot storage.
            run_id_policy: Chooses the default bucket and older candidates.
            max_retries: Older buckets to try after an empty default bucket.
            records_limit: Row limit used when the query's limit is 0.
            clock: Returns now as epoch seconds.

        Raises:
            ValueError: If max_retries exceeds what the policy can propose.
        """
        if max_retries < 0 or max_retries > run_id_policy.max_attempts:
            raise ValueError(
                f"max_retries must be between 0 and {run_id_policy.max_attempts}"
            )
        self._hdfs_stats_repo = hdfs_stats_repo
        self._run_id_policy = run_id_policy
        self._max_retries = max_retries
        self._records_limit = records_limit
        self._clock = clock

    @traced("hdfs_stats.resolve")
    async def execute(self, query: HdfsStatsQuery) -> Projection[list[HdfsStats]]:
        """Return the snapshots of a single bucket (possibly empty).

        Raises:
            ValidationException: If limit is negative.
            StorageUnavailableException: If a lookup fails (from repo). Not retried.
        """
        if query.limit < 0:
            raise ValidationException("limit must not be negative", field="limit")
        limit = query.limit if query.limit != 0 else self._records_limit

        if query.explicit_run_id:
            stats = await self._lookup(query, query.run_id, limit)
            add_span_attributes(lookups=1)
            return Projection(stats, SerializationContext())

        run_id = self._run_id_policy.default_run_id(self._clock())
        stats = await self._lookup(query, run_id, limit)
        attempt = 0
        while not stats and attempt < self._max_retries:
            run_id = self._run_id_policy.older_run_id(attempt, run_id)
            logger.info(
                "No hdfs stats for cluster=%s path=%s; retrying older runId=%d (attempt %d)",
                query.cluster,
                query.path_prefix,
                run_id,
                attempt,
            )
            stats = await self._lookup(query, run_id, limit)
            attempt += 1

        add_span_attributes(lookups=attempt + 1, resolved_run_id=run_id)
        if not stats:
            logger.info(
                "No hdfs stats for cluster=%s path=%s after %d older runIds",
                query.cluster,
                query.path_prefix,
                attempt,
            )
        return Projection(stats, SerializationContext())

    async def _lookup(
        self, query: HdfsStatsQuery, run_id: int, limit: int
    ) -> list[HdfsStats]:
        return await self._hdfs_stats_repo.lookup_bucket(
            cluster=query.cluster,
            path_prefix=query.path_prefix,
            run_id=run_id,
            limit=limit,
        )
