"""Domain enumerations for the job history service.

Enums represent fixed sets of domain values (e.g. serialization detail level).
"""

from enum import Enum


class DetailLevel(str, Enum):
    """How much of a flow or job is rendered in a response.

    EVERYTHING renders every field (configuration subject to a key filter).
    The flow-summary levels drop configuration and counters; the job-stats
    variant keeps per-job statistics under each flow.
    """

    EVERYTHING = "everything"
    FLOW_SUMMARY_STATS_ONLY = "flow_summary_stats_only"
    FLOW_SUMMARY_STATS_WITH_JOB_STATS = "flow_summary_stats_with_job_stats"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid detail levels as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [level.value for level in cls]
