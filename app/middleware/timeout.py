"""Request timeout middleware.

Cancels the request if it runs longer than the configured timeout (asyncio.wait_for)
and answers 504. Long flowStats scans with an open limit are the usual cause.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming and background tasks.
"""

import asyncio
import json
import logging
from typing import Callable

from app.middleware._headers import scope_state

logger = logging.getLogger(__name__)


def TimeoutMiddleware(app: Callable, timeout_seconds: int) -> Callable:
    """Cancel request after timeout_seconds (sends 504 on timeout). Raw ASGI.

    When the response has already started, the connection is left to
    close without a second response start.
    """

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        response_started = False

        async def send_wrapper(message: dict) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(
                app(scope, receive, send_wrapper),
                timeout=float(timeout_seconds),
            )
        except asyncio.TimeoutError:
            request_id = scope_state(scope).get("request_id")
            logger.warning(
                "Request timed out after %s seconds: %s %s (request_id=%s)",
                timeout_seconds,
                scope.get("method", ""),
                scope.get("path", ""),
                request_id,
            )
            if response_started:
                return
            body = json.dumps(
                {
                    "error": "GATEWAY_TIMEOUT",
                    "message": f"Request timed out after {timeout_seconds} seconds",
                    "details": {
                        "timeout_seconds": timeout_seconds,
                        "request_id": request_id,
                    },
                }
            ).encode()
            await send({
                "type": "http.response.start",
                "status": 504,
                "headers": [
                    (b"content-type", b"application/json"),
                    (b"content-length", str(len(body)).encode()),
                ],
            })
            await send({
                "type": "http.response.body",
                "body": body,
                "more_body": False,
            })

    return asgi_app
