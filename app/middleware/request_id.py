"""Request ID middleware.

Generates or forwards X-Request-ID and sets it on the response for tracing.
Client-provided values are sanitized (length + character set) to prevent log injection.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming and background tasks.
"""

import re
import uuid
from typing import Callable

from app.middleware._headers import append_response_header, get_header, scope_state

# Safe for logging: alphanumeric, hyphen, underscore; max length to avoid abuse.
REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)


def sanitize_request_id(raw: str | None) -> str:
    """Return raw if valid and safe; otherwise return a new UUID."""
    if raw is None:
        return str(uuid.uuid4())
    candidate = raw.strip()
    if not REQUEST_ID_ALLOWED_PATTERN.match(candidate):
        return str(uuid.uuid4())
    return candidate


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward the request id on each request and response. Raw ASGI.

    The id is stored in request.state.request_id for logging and for the
    correlation id fallback.
    """

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = sanitize_request_id(get_header(scope, header_name))
        scope_state(scope)["request_id"] = request_id

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                append_response_header(message, header_name, request_id)
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
