"""Flow use cases: paginated flow statistics, latest flow series."""

from app.application.use_cases.flows.get_flow_series import GetFlowSeriesUseCase
from app.application.use_cases.flows.get_flow_stats_page import (
    MAX_LIMIT,
    MAX_TIMESTAMP,
    GetFlowStatsPageUseCase,
    normalize_limit,
)

__all__ = [
    "MAX_LIMIT",
    "MAX_TIMESTAMP",
    "GetFlowSeriesUseCase",
    "GetFlowStatsPageUseCase",
    "normalize_limit",
]
