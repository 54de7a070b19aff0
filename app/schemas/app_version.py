"""App version API schemas."""

from app.schemas.base import ApiModel


class VersionInfoResponse(ApiModel):
    """A version of an application and when it last ran (epoch ms)."""

    version: str
    timestamp: int
