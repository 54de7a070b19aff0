"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    IAppVersionRepository,
    IHdfsStatsRepository,
    IJobHistoryRepository,
)
from app.application.interfaces.services import IFlowKeyCodec, IRunIdPolicy

__all__ = [
    "IAppVersionRepository",
    "IFlowKeyCodec",
    "IHdfsStatsRepository",
    "IJobHistoryRepository",
    "IRunIdPolicy",
]
