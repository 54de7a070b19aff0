"""Application services: cursor codec, bucket policy, configuration filters."""

from app.application.services.configuration_filter import (
    ConfigurationFilter,
    RegexConfigurationFilter,
    build_configuration_filter,
)
from app.application.services.flow_key_converter import FlowKeyConverter
from app.application.services.run_id_policy import RunIdPolicy, hour_bucket

__all__ = [
    "ConfigurationFilter",
    "FlowKeyConverter",
    "RegexConfigurationFilter",
    "RunIdPolicy",
    "build_configuration_filter",
    "hour_bucket",
]
