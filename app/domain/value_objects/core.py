"""Domain value objects for the job history service.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from dataclasses import dataclass


def _validate_component(value: str, field_name: str) -> None:
    """Raise ValueError if a key component is not a string."""
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string, got {type(value).__name__}")


@dataclass(frozen=True, order=True)
class FlowKey:
    """Composite key identifying one flow run (SRP: flow identity and order).

    Ordering is lexicographic over (cluster, user_name, app_id, version,
    run_id), which is the order flow statistics are scanned in. Also used
    as the pagination cursor value.
    """

    cluster: str
    user_name: str
    app_id: str
    version: str
    run_id: int

    def __post_init__(self) -> None:
        for field_name in ("cluster", "user_name", "app_id", "version"):
            _validate_component(getattr(self, field_name), field_name)
        if not isinstance(self.run_id, int) or self.run_id < 0:
            raise ValueError("run_id must be a non-negative integer")

    def in_scope(
        self, cluster: str, user_name: str, app_id: str, version: str | None = None
    ) -> bool:
        """Return whether this key lies in the given partition (version optional)."""
        if (self.cluster, self.user_name, self.app_id) != (cluster, user_name, app_id):
            return False
        return version is None or self.version == version


@dataclass(frozen=True, order=True)
class JobKey:
    """Key of a single job: the owning flow's key plus the job id."""

    flow_key: FlowKey
    job_id: str

    @property
    def cluster(self) -> str:
        return self.flow_key.cluster
