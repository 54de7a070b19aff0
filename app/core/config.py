"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Nothing is required at load time; a missing
DATABASE_URL surfaces as 503 on the first query that needs storage.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Query defaults (limits, lookback, retry policy) live here so they can be
    tuned per deployment without code changes; see validate_query_defaults.
    """

    # App
    app_name: str = "jobhistory"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (job history store): postgresql+asyncpg://... or sqlite+aiosqlite://...
    database_url: str = ""
    database_echo: bool = False
    # Optional pool/driver overrides (None = use defaults in database.py)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    db_command_timeout: int | None = None

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"
    correlation_id_header: str = "X-Correlation-ID"

    # Query defaults
    flow_stats_default_limit: int = 100
    hdfs_records_limit: int = 1000
    hdfs_default_lookback_seconds: int = 2 * 3600  # newest buckets are often incomplete
    hdfs_max_retries: int = 3
    hdfs_age_multipliers_days: list[int] = [1, 2, 7]
    path_series_default_window_days: int = 7

    # Redis Cache
    redis_enabled: bool = True
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None
    cache_ttl_app_versions: int = 600

    # OpenTelemetry
    telemetry_enabled: bool = True
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_query_defaults(self) -> "Settings":
        """Validate limits and the HDFS fallback policy.

        - hdfs_max_retries cannot exceed the number of age multipliers.
        - Age multipliers must be positive so every retry reads an older bucket.
        """
        if self.flow_stats_default_limit < 0 or self.hdfs_records_limit < 1:
            raise ValueError(
                "FLOW_STATS_DEFAULT_LIMIT must be >= 0 and HDFS_RECORDS_LIMIT >= 1"
            )
        if self.hdfs_max_retries < 0:
            raise ValueError("HDFS_MAX_RETRIES must be >= 0")
        if self.hdfs_max_retries > len(self.hdfs_age_multipliers_days):
            raise ValueError(
                f"HDFS_MAX_RETRIES ({self.hdfs_max_retries}) exceeds the number of "
                f"HDFS_AGE_MULTIPLIERS_DAYS ({len(self.hdfs_age_multipliers_days)})"
            )
        if any(m <= 0 for m in self.hdfs_age_multipliers_days):
            raise ValueError("HDFS_AGE_MULTIPLIERS_DAYS must all be positive")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
