"""Application version entity (distinct versions seen for an app)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class VersionInfo:
    """A version of an application and when it was last run (epoch ms)."""

    version: str
    timestamp: int
