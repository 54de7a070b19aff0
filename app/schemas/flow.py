"""Flow API schemas."""

from pydantic import Field, model_serializer

from app.schemas.base import ApiModel
from app.schemas.job import JobResponse


class FlowResponse(ApiModel):
    """A flow (application run) with aggregated statistics.

    jobs is left out of the JSON when the detail level is summary-only.
    """

    cluster: str
    user_name: str
    app_id: str
    version: str
    run_id: int
    flow_name: str
    queue: str
    job_count: int
    total_maps: int
    total_reduces: int
    map_slot_millis: int
    reduce_slot_millis: int
    hdfs_bytes_read: int
    hdfs_bytes_written: int
    submit_time: int = Field(..., description="Epoch milliseconds")
    launch_time: int = Field(..., description="Epoch milliseconds")
    finish_time: int = Field(..., description="Epoch milliseconds")
    duration: int = Field(..., description="finish_time - launch_time, ms")
    jobs: list[JobResponse] | None = None

    @model_serializer(mode="wrap")
    def _omit_absent_jobs(self, handler):
        data = handler(self)
        if self.jobs is None:
            data.pop("jobs", None)
        return data


class FlowStatsPageResponse(ApiModel):
    """One page of flow statistics.

    next_cursor is the startCursor for the following page, or null on the
    last page. request_parameters echoes the normalized request.
    """

    values: list[FlowResponse]
    limit: int
    next_cursor: str | None
    request_parameters: dict[str, str]
