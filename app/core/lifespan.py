"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (logging, cache,
telemetry, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, Redis cache (if enabled), telemetry (if enabled).
    Shutdown order: cache disconnect, telemetry shutdown, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()

    if settings.redis_enabled:
        from app.infrastructure.cache.redis_cache import CacheService

        cache = CacheService()
        await cache.connect()
        app.state.cache = cache
    else:
        app.state.cache = None

    if settings.telemetry_enabled:
        from app.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        try:
            telemetry = TelemetryConfig.from_settings(settings)
        except Exception as e:
            logger.exception("Tracing setup failed; continuing without it: %s", e)
        else:
            set_telemetry(telemetry)
            telemetry.instrument_app(app, redis=settings.redis_enabled)
            logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    if getattr(app.state, "cache", None) is not None:
        await app.state.cache.disconnect()
        logger.info("Cache disconnected")

    from app.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")

    from app.infrastructure.persistence import database

    if getattr(database, "engine", None) is not None:
        await database.engine.dispose()
        logger.info("Database engine disposed")
