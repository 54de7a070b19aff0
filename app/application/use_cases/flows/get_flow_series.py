"""Flow series use case: latest flows of an app, rendered with full detail."""

from __future__ import annotations

from app.application.dtos.queries import FlowSeriesQuery
from app.application.dtos.serialization import Projection, SerializationContext
from app.application.interfaces.repositories import IJobHistoryRepository
from app.application.services.configuration_filter import build_configuration_filter
from app.domain.entities import Flow
from app.domain.enums import DetailLevel


class GetFlowSeriesUseCase:
    """Returns the most recent flows (newest first) with their jobs."""

    def __init__(self, job_history_repo: IJobHistoryRepository) -> None:
        self._job_history_repo = job_history_repo

    async def execute(self, query: FlowSeriesQuery) -> Projection[list[Flow]]:
        """Fetch up to query.limit flows (at least one).

        Raises:
            ValidationException: If an includeConfRegex pattern does not compile.
        """
        key_filter = build_configuration_filter(
            query.include_config, query.include_config_regex
        )
        limit = max(query.limit, 1)
        flows = await self._job_history_repo.get_flow_series(
            cluster=query.cluster,
            user=query.user,
            app_id=query.app_id,
            version=query.version,
            limit=limit,
        )
        context = SerializationContext(DetailLevel.EVERYTHING, key_filter)
        return Projection(flows, context)
