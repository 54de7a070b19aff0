"""HDFS directory snapshot entity.

One row per (cluster, path, run_id) bucket, holding the directory's
usage attributes (file_count, space_consumed, ...) at collection time.
"""

from dataclasses import dataclass, field


@dataclass
class HdfsStats:
    """Directory-size snapshot for one path in one hourly bucket."""

    cluster: str
    path: str
    run_id: int
    attributes: dict[str, int] = field(default_factory=dict)
