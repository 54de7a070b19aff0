"""HDFS stats API schemas."""

from app.schemas.base import ApiModel


class HdfsStatsResponse(ApiModel):
    """Directory usage snapshot for one path in one hourly bucket."""

    cluster: str
    path: str
    run_id: int
    attributes: dict[str, int | float]
