"""Query DTOs: named optional parameters for each read operation.

Zero means "not supplied" for every numeric field, matching the HTTP
surface where omitted integer query params arrive as 0.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FlowStatsQuery:
    """Time-windowed flow statistics for one application.

    Attributes:
        cluster: Cluster name.
        user: Owning user.
        app_id: Application id.
        version: Restrict to one version; None scans all versions.
        start_time: Lower bound on run id (seconds since epoch), inclusive.
        end_time: Upper bound on run id, inclusive; 0 means unbounded.
        limit: Page size; 0 means the largest page the service allows.
        start_cursor: Base64 cursor returned as a previous page's next cursor.
        include_jobs: Render per-job statistics under each flow.
    """

    cluster: str
    user: str
    app_id: str
    version: str | None = None
    start_time: int = 0
    end_time: int = 0
    limit: int = 100
    start_cursor: str | None = None
    include_jobs: bool = False


@dataclass(frozen=True)
class FlowSeriesQuery:
    """Most recent flows for an application, with jobs.

    include_config takes precedence over include_config_regex when both
    are given; with neither, all configuration keys are rendered.
    """

    cluster: str
    user: str
    app_id: str
    version: str | None = None
    limit: int = 1
    include_config: list[str] = field(default_factory=list)
    include_config_regex: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class HdfsStatsQuery:
    """Directory snapshots for one cluster at one hourly bucket.

    run_id of 0 asks for the most recent complete bucket; the resolver
    may then fall back to older buckets.
    """

    cluster: str
    path_prefix: str | None = None
    run_id: int = 0
    limit: int = 0

    @property
    def explicit_run_id(self) -> bool:
        return self.run_id != 0


@dataclass(frozen=True)
class PathSeriesQuery:
    """Time series of one attribute for one directory path."""

    cluster: str
    attribute: str
    path: str | None = None
    start_time: int = 0
    end_time: int = 0
    limit: int = 0
