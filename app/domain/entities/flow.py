"""Flow domain entity.

A flow is the chain of jobs launched by one run of an application
(cluster, user, app id, version, run id). Aggregated statistics are
summed over its jobs by the history collector.
"""

from dataclasses import dataclass, field

from app.domain.entities.job import JobDetails
from app.domain.value_objects import FlowKey


@dataclass
class Flow:
    """Domain entity for a flow (one application run)."""

    flow_key: FlowKey
    flow_name: str = ""
    queue: str = ""
    job_count: int = 0
    total_maps: int = 0
    total_reduces: int = 0
    map_slot_millis: int = 0
    reduce_slot_millis: int = 0
    hdfs_bytes_read: int = 0
    hdfs_bytes_written: int = 0
    submit_time: int = 0
    launch_time: int = 0
    finish_time: int = 0
    jobs: list[JobDetails] = field(default_factory=list)

    @property
    def duration(self) -> int:
        """Milliseconds from first launch to last finish (0 when unknown)."""
        if not self.launch_time or not self.finish_time:
            return 0
        return self.finish_time - self.launch_time

    @property
    def version(self) -> str:
        return self.flow_key.version

    @property
    def run_id(self) -> int:
        return self.flow_key.run_id
