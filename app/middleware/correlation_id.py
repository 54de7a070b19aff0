"""Correlation ID middleware.

Propagates X-Correlation-ID across services: forwarded from the client,
else the request id, else a new UUID.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming and background tasks.
"""

import uuid
from typing import Callable

from app.middleware._headers import append_response_header, get_header, scope_state
from app.middleware.request_id import sanitize_request_id


def CorrelationIDMiddleware(
    app: Callable, header_name: str = "X-Correlation-ID"
) -> Callable:
    """Add or forward the correlation id. Must run inside RequestIDMiddleware. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        state = scope_state(scope)
        raw = get_header(scope, header_name)
        if raw:
            correlation_id = sanitize_request_id(raw)
        else:
            correlation_id = state.get("request_id") or str(uuid.uuid4())
        state["correlation_id"] = correlation_id

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                append_response_header(message, header_name, correlation_id)
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
