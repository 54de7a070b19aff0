"""Flow statistics use case: one bounded page of a time-windowed flow scan.

The scan asks storage for limit + 1 flows. The extra flow is a lookahead
sentinel: when it comes back, its key becomes the next page's cursor and
it is left out of this page. Re-issuing the query with that cursor starts
the next scan exactly at the sentinel, so consecutive pages neither
overlap nor skip flows while the data is unchanged.
"""

from __future__ import annotations

import logging

from app.application.dtos.pagination import PaginatedResult
from app.application.dtos.queries import FlowStatsQuery
from app.application.dtos.serialization import Projection, SerializationContext
from app.application.interfaces.repositories import IJobHistoryRepository
from app.application.interfaces.services import IFlowKeyCodec
from app.domain.entities import Flow
from app.domain.enums import DetailLevel
from app.domain.exceptions import InvalidCursorException
from app.domain.value_objects import FlowKey
from app.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)

# Largest page size a client may ask for; one below leaves room for the lookahead row.
MAX_LIMIT = 2**31 - 1
# Largest representable run id; used when the caller leaves end_time open.
MAX_TIMESTAMP = 2**63 - 1


def normalize_limit(limit: int) -> int:
    """Clamp a requested page size into [1, MAX_LIMIT - 1].

    0 (not supplied) and anything at or above MAX_LIMIT become MAX_LIMIT - 1;
    negative values become 1.
    """
    if limit == 0 or limit >= MAX_LIMIT:
        return MAX_LIMIT - 1
    if limit < 1:
        return 1
    return limit


class GetFlowStatsPageUseCase:
    """Paginates flow statistics with an opaque continuation cursor."""

    def __init__(
        self,
        job_history_repo: IJobHistoryRepository,
        flow_key_codec: IFlowKeyCodec,
    ) -> None:
        self._job_history_repo = job_history_repo
        self._codec = flow_key_codec

    @traced("flow_stats.fetch_page")
    async def execute(self, query: FlowStatsQuery) -> Projection[PaginatedResult[Flow]]:
        """Return one page of flows plus the context to render it with.

        Args:
            query: Scope, time window, page size and optional cursor.

        Returns:
            Projection of the page; detail level depends on include_jobs.

        Raises:
            InvalidCursorException: If start_cursor does not decode to a flow
                key in the query's scope. Storage is not called in that case.
            StorageUnavailableException: If the scan fails (from repo).
        """
        version = query.version.strip() if query.version else None
        version = version or None
        start_key = self._decode_start_cursor(query, version)
        end_time = query.end_time if query.end_time != 0 else MAX_TIMESTAMP
        limit = normalize_limit(query.limit)

        flows = await self._job_history_repo.scan_flow_stats(
            cluster=query.cluster,
            user=query.user,
            app_id=query.app_id,
            version=version,
            start_time=query.start_time,
            end_time=end_time,
            limit=limit + 1,
            start_key=start_key,
        )

        page: PaginatedResult[Flow] = PaginatedResult(limit=limit)
        page.add_request_parameter("cluster", query.cluster)
        page.add_request_parameter("user", query.user)
        page.add_request_parameter("appId", query.app_id)
        page.add_request_parameter("version", version or "all")
        page.add_request_parameter("startTime", str(query.start_time))
        page.add_request_parameter("endTime", str(end_time))
        page.add_request_parameter("limit", str(limit))
        if query.start_cursor is not None:
            page.add_request_parameter("startCursor", query.start_cursor)
        page.add_request_parameter("includeJobs", "true" if query.include_jobs else "false")

        if len(flows) > limit:
            page.values = list(flows[:limit])
            page.next_cursor = self._codec.to_bytes(flows[limit].flow_key)
        else:
            page.values = list(flows)
            page.next_cursor = None

        add_span_attributes(page_size=len(page.values), has_next=page.has_next)
        logger.debug(
            "Flow stats page for %s/%s/%s: %d flows, next page %s",
            query.cluster,
            query.user,
            query.app_id,
            len(page.values),
            "yes" if page.has_next else "no",
        )

        detail_level = (
            DetailLevel.FLOW_SUMMARY_STATS_WITH_JOB_STATS
            if query.include_jobs
            else DetailLevel.FLOW_SUMMARY_STATS_ONLY
        )
        return Projection(page, SerializationContext(detail_level=detail_level))

    def _decode_start_cursor(
        self, query: FlowStatsQuery, version: str | None
    ) -> FlowKey | None:
        """Decode the client cursor into the scan's starting key."""
        if query.start_cursor is None:
            return None
        try:
            key = self._codec.decode_cursor(query.start_cursor)
        except ValueError as e:
            raise InvalidCursorException(query.start_cursor, str(e)) from e
        if not key.in_scope(query.cluster, query.user, query.app_id, version):
            raise InvalidCursorException(
                query.start_cursor, "cursor belongs to a different flow scope"
            )
        return key
