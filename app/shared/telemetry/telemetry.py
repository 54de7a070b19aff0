"""OpenTelemetry tracing for the query service.

Spans go to the console in development or to an OTLP gRPC collector.
Instrumentation covers inbound requests, SQL reads, the optional Redis
cache and log records (trace_id/span_id injection). Telemetry failures are
logged and never stop the service from starting.
"""

import logging
from collections.abc import Callable

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.redis import RedisInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from sqlalchemy.ext.asyncio import AsyncEngine

from app.core.config import Settings

logger = logging.getLogger(__name__)

# Liveness and readiness probes are polled constantly; they are not traced.
UNTRACED_URLS = "/api/v1/health"


def make_span_exporter(
    exporter_type: str, otlp_endpoint: str | None
) -> SpanExporter | None:
    """Return the exporter for TELEMETRY_EXPORTER, or None for "none".

    "otlp" without an endpoint and unknown names fall back to the console.
    """
    if exporter_type == "none":
        return None
    if exporter_type == "otlp" and otlp_endpoint:
        logger.info("Exporting spans to OTLP collector at %s", otlp_endpoint)
        return OTLPSpanExporter(
            endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
        )
    if exporter_type != "console":
        logger.warning(
            "Span exporter %r unusable (endpoint=%s); using console",
            exporter_type,
            otlp_endpoint,
        )
    return ConsoleSpanExporter()


class TelemetryConfig:
    """Tracer provider plus the instrumentations attached to it."""

    def __init__(self, tracer_provider: TracerProvider) -> None:
        self.tracer_provider = tracer_provider

    @classmethod
    def from_settings(cls, settings: Settings) -> "TelemetryConfig":
        """Build the provider from telemetry settings and install it globally."""
        resource = Resource(
            attributes={
                SERVICE_NAME: settings.app_name,
                SERVICE_VERSION: settings.app_version,
                "deployment.environment": settings.telemetry_environment,
            }
        )
        provider = TracerProvider(
            resource=resource,
            sampler=TraceIdRatioBased(settings.telemetry_sample_rate),
        )
        exporter = make_span_exporter(
            settings.telemetry_exporter, settings.telemetry_otlp_endpoint
        )
        if exporter is not None:
            provider.add_span_processor(BatchSpanProcessor(exporter))
        trace.set_tracer_provider(provider)
        logger.info(
            "Tracing enabled: service=%s exporter=%s sample_rate=%s",
            settings.app_name,
            settings.telemetry_exporter,
            settings.telemetry_sample_rate,
        )
        return cls(provider)

    def _instrument(self, name: str, apply: Callable[[], object]) -> None:
        try:
            apply()
            logger.info("%s instrumentation enabled", name)
        except Exception as e:
            logger.exception("Failed to instrument %s: %s", name, e)

    def instrument_app(self, app: FastAPI, redis: bool = False) -> None:
        """Instrument inbound requests, log records and (optionally) Redis."""
        self._instrument(
            "FastAPI",
            lambda: FastAPIInstrumentor.instrument_app(
                app,
                tracer_provider=self.tracer_provider,
                excluded_urls=UNTRACED_URLS,
            ),
        )
        self._instrument(
            "logging",
            lambda: LoggingInstrumentor().instrument(
                tracer_provider=self.tracer_provider, set_logging_format=True
            ),
        )
        if redis:
            self._instrument(
                "Redis",
                lambda: RedisInstrumentor().instrument(
                    tracer_provider=self.tracer_provider
                ),
            )

    def instrument_sqlalchemy(self, engine: AsyncEngine) -> None:
        """Trace SQL statements issued through engine."""
        self._instrument(
            "SQLAlchemy",
            lambda: SQLAlchemyInstrumentor().instrument(
                engine=engine.sync_engine,
                tracer_provider=self.tracer_provider,
                enable_commenter=True,
            ),
        )

    def shutdown(self) -> None:
        """Flush pending spans and stop the provider."""
        try:
            self.tracer_provider.shutdown()
        except Exception as e:
            logger.exception("Error during telemetry shutdown: %s", e)


_telemetry: TelemetryConfig | None = None


def get_telemetry() -> TelemetryConfig | None:
    """Return the telemetry installed at startup, if any."""
    return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    global _telemetry
    _telemetry = telemetry
