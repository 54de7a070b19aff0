"""ASGI header helpers shared by the raw middleware."""

from collections.abc import MutableMapping
from typing import Any


def get_header(scope: MutableMapping[str, Any], name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def append_response_header(message: MutableMapping[str, Any], name: str, value: str) -> None:
    """Add a header to an http.response.start message."""
    headers = list(message.get("headers", []))
    headers.append((name.encode(), value.encode()))
    message["headers"] = headers


def scope_state(scope: MutableMapping[str, Any]) -> dict[str, Any]:
    """Return the per-request state dict (request.state), creating it if needed."""
    return scope.setdefault("state", {})
