"""Shared base for API response schemas (camelCase JSON field names)."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Response model rendered with camelCase keys; accepts snake_case on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
