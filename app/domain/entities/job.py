"""Job domain entity.

A job is one MapReduce (or compatible) execution recorded in job history.
Timestamps are epoch milliseconds, as written by the history collector.
"""

from dataclasses import dataclass, field

from app.domain.value_objects import JobKey


@dataclass
class JobDetails:
    """Domain entity for a single job execution."""

    job_key: JobKey
    job_name: str = ""
    user: str = ""
    priority: str = ""
    status: str = ""
    submit_time: int = 0
    launch_time: int = 0
    finish_time: int = 0
    total_maps: int = 0
    total_reduces: int = 0
    finished_maps: int = 0
    finished_reduces: int = 0
    failed_maps: int = 0
    failed_reduces: int = 0
    map_slot_millis: int = 0
    reduce_slot_millis: int = 0
    hdfs_bytes_read: int = 0
    hdfs_bytes_written: int = 0
    configuration: dict[str, str] = field(default_factory=dict)
    counters: dict[str, int] = field(default_factory=dict)

    @property
    def job_id(self) -> str:
        return self.job_key.job_id

    @property
    def run_time(self) -> int:
        """Milliseconds between launch and finish (0 when either is unknown)."""
        if not self.launch_time or not self.finish_time:
            return 0
        return self.finish_time - self.launch_time
