"""HDFS path time series use case: one attribute of one path over time."""

from __future__ import annotations

import time
from collections.abc import Callable

from app.application.dtos.queries import PathSeriesQuery
from app.application.dtos.serialization import Projection, SerializationContext
from app.application.interfaces.repositories import IHdfsStatsRepository
from app.application.services.configuration_filter import RegexConfigurationFilter
from app.application.services.run_id_policy import SECONDS_PER_DAY
from app.domain.entities import HdfsStats
from app.domain.enums import DetailLevel
from app.domain.exceptions import MissingParameterException, ValidationException


class GetHdfsPathTimeSeriesUseCase:
    """Reads a path's snapshots and narrows rendering to the requested attribute.

    Defaults: start_time = now, end_time = now - window. The window is
    scanned from start_time back to end_time, so an explicit start_time
    earlier than end_time selects nothing.
    """

    def __init__(
        self,
        hdfs_stats_repo: IHdfsStatsRepository,
        records_limit: int,
        default_window_days: int = 7,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._hdfs_stats_repo = hdfs_stats_repo
        self._records_limit = records_limit
        self._default_window_days = default_window_days
        self._clock = clock

    async def execute(self, query: PathSeriesQuery) -> Projection[list[HdfsStats]]:
        """Return the path's snapshots; only query.attribute is rendered.

        Raises:
            MissingParameterException: If path is missing or blank.
            ValidationException: If attribute is not a valid pattern or limit
                is negative.
        """
        if not query.path or not query.path.strip():
            raise MissingParameterException("path")
        key_filter = RegexConfigurationFilter([query.attribute], field="attribute")

        if query.limit < 0:
            raise ValidationException("limit must not be negative", field="limit")
        limit = query.limit if query.limit != 0 else self._records_limit
        now = int(self._clock())
        start_time = query.start_time if query.start_time != 0 else now
        end_time = (
            query.end_time
            if query.end_time != 0
            else now - self._default_window_days * SECONDS_PER_DAY
        )

        stats = await self._hdfs_stats_repo.scan_time_series(
            cluster=query.cluster,
            path=query.path,
            attribute=query.attribute,
            start_time=start_time,
            end_time=end_time,
            limit=limit,
        )
        return Projection(stats, SerializationContext(DetailLevel.EVERYTHING, key_filter))
