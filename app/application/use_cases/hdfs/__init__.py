"""HDFS use cases: bucket snapshots with fallback, path attribute time series."""

from app.application.use_cases.hdfs.get_hdfs_stats import GetHdfsStatsUseCase
from app.application.use_cases.hdfs.get_path_time_series import (
    GetHdfsPathTimeSeriesUseCase,
)

__all__ = [
    "GetHdfsPathTimeSeriesUseCase",
    "GetHdfsStatsUseCase",
]
