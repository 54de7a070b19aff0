"""Render domain results as API schemas according to their SerializationContext.

Detail levels:
    EVERYTHING: all fields; configuration narrowed by the context's key filter.
    FLOW_SUMMARY_STATS_WITH_JOB_STATS: flow stats plus per-job stats, no
        configuration or counters.
    FLOW_SUMMARY_STATS_ONLY: flow stats only.
"""

import base64

from app.application.dtos import PaginatedResult, Projection, SerializationContext
from app.domain.entities import Flow, HdfsStats, JobDetails, VersionInfo
from app.domain.enums import DetailLevel
from app.schemas.app_version import VersionInfoResponse
from app.schemas.flow import FlowResponse, FlowStatsPageResponse
from app.schemas.hdfs import HdfsStatsResponse
from app.schemas.job import JobResponse


def serialize_job(job: JobDetails, context: SerializationContext) -> JobResponse:
    """Render a job; configuration and counters only at EVERYTHING."""
    key = job.job_key.flow_key
    full = context.detail_level == DetailLevel.EVERYTHING
    return JobResponse(
        cluster=key.cluster,
        user_name=key.user_name,
        app_id=key.app_id,
        version=key.version,
        run_id=key.run_id,
        job_id=job.job_id,
        job_name=job.job_name,
        user=job.user,
        priority=job.priority,
        status=job.status,
        submit_time=job.submit_time,
        launch_time=job.launch_time,
        finish_time=job.finish_time,
        run_time=job.run_time,
        total_maps=job.total_maps,
        total_reduces=job.total_reduces,
        finished_maps=job.finished_maps,
        finished_reduces=job.finished_reduces,
        failed_maps=job.failed_maps,
        failed_reduces=job.failed_reduces,
        map_slot_millis=job.map_slot_millis,
        reduce_slot_millis=job.reduce_slot_millis,
        hdfs_bytes_read=job.hdfs_bytes_read,
        hdfs_bytes_written=job.hdfs_bytes_written,
        configuration=context.filter_mapping(job.configuration) if full else None,
        counters=dict(job.counters) if full else None,
    )


def serialize_flow(flow: Flow, context: SerializationContext) -> FlowResponse:
    """Render a flow; jobs are dropped at FLOW_SUMMARY_STATS_ONLY."""
    key = flow.flow_key
    jobs = None
    if context.detail_level != DetailLevel.FLOW_SUMMARY_STATS_ONLY:
        jobs = [serialize_job(j, context) for j in flow.jobs]
    return FlowResponse(
        cluster=key.cluster,
        user_name=key.user_name,
        app_id=key.app_id,
        version=key.version,
        run_id=key.run_id,
        flow_name=flow.flow_name,
        queue=flow.queue,
        job_count=flow.job_count,
        total_maps=flow.total_maps,
        total_reduces=flow.total_reduces,
        map_slot_millis=flow.map_slot_millis,
        reduce_slot_millis=flow.reduce_slot_millis,
        hdfs_bytes_read=flow.hdfs_bytes_read,
        hdfs_bytes_written=flow.hdfs_bytes_written,
        submit_time=flow.submit_time,
        launch_time=flow.launch_time,
        finish_time=flow.finish_time,
        duration=flow.duration,
        jobs=jobs,
    )


def serialize_flows(projection: Projection[list[Flow]]) -> list[FlowResponse]:
    return [serialize_flow(f, projection.context) for f in projection.value]


def serialize_flow_stats_page(
    projection: Projection[PaginatedResult[Flow]],
) -> FlowStatsPageResponse:
    """Render a flow stats page; the next cursor goes out as standard base64."""
    page = projection.value
    next_cursor = None
    if page.next_cursor is not None:
        next_cursor = base64.b64encode(page.next_cursor).decode("ascii")
    return FlowStatsPageResponse(
        values=[serialize_flow(f, projection.context) for f in page.values],
        limit=page.limit,
        next_cursor=next_cursor,
        request_parameters=dict(page.request_parameters),
    )


def serialize_hdfs_stats(
    projection: Projection[list[HdfsStats]],
) -> list[HdfsStatsResponse]:
    """Render snapshots; attributes are narrowed by the context's key filter."""
    return [
        HdfsStatsResponse(
            cluster=s.cluster,
            path=s.path,
            run_id=s.run_id,
            attributes=projection.context.filter_mapping(s.attributes),
        )
        for s in projection.value
    ]


def serialize_versions(versions: list[VersionInfo]) -> list[VersionInfoResponse]:
    return [VersionInfoResponse(version=v.version, timestamp=v.timestamp) for v in versions]
