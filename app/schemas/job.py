"""Job API schemas."""

from pydantic import Field, model_serializer

from app.schemas.base import ApiModel


class JobResponse(ApiModel):
    """A job execution.

    configuration and counters are left out of the JSON entirely (not
    rendered as null) when the request's detail level excludes them.
    """

    cluster: str
    user_name: str
    app_id: str
    version: str
    run_id: int
    job_id: str
    job_name: str
    user: str
    priority: str
    status: str
    submit_time: int = Field(..., description="Epoch milliseconds")
    launch_time: int = Field(..., description="Epoch milliseconds")
    finish_time: int = Field(..., description="Epoch milliseconds")
    run_time: int = Field(..., description="finish_time - launch_time, ms")
    total_maps: int
    total_reduces: int
    finished_maps: int
    finished_reduces: int
    failed_maps: int
    failed_reduces: int
    map_slot_millis: int
    reduce_slot_millis: int
    hdfs_bytes_read: int
    hdfs_bytes_written: int
    configuration: dict[str, str] | None = None
    counters: dict[str, int] | None = None

    @model_serializer(mode="wrap")
    def _omit_absent_detail(self, handler):
        data = handler(self)
        if self.configuration is None:
            data.pop("configuration", None)
        if self.counters is None:
            data.pop("counters", None)
        return data
