"""Security headers middleware.

Adds common security-related response headers (CSP, HSTS, X-Content-Type-Options, etc.).
API responses get a locked-down CSP; the HTML pages (landing page, Swagger,
ReDoc) get one that lets them load their own scripts and styles.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming and background tasks.
"""

from typing import Callable

API_CSP = "default-src 'none'; frame-ancestors 'none'"
PAGE_CSP = (
    "default-src 'self'; "
    "script-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
    "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net https://fonts.googleapis.com; "
    "font-src 'self' https://fonts.gstatic.com; "
    "img-src 'self' data: https://fastapi.tiangolo.com; "
    "frame-ancestors 'none'"
)
PAGE_PATHS = frozenset({"/", "/docs", "/docs/oauth2-redirect", "/redoc"})

DEFAULT_HEADERS = {
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Cache-Control": "no-store",
}


def SecurityHeadersMiddleware(
    app: Callable,
    headers: dict[str, str] | None = None,
    page_paths: frozenset[str] = PAGE_PATHS,
) -> Callable:
    """Set security headers on all responses; headers already set are kept. Raw ASGI."""
    resolved = headers if headers is not None else DEFAULT_HEADERS.copy()
    base = [(k.encode(), v.encode()) for k, v in resolved.items()]
    api_headers = [*base, (b"content-security-policy", API_CSP.encode())]
    page_headers = [*base, (b"content-security-policy", PAGE_CSP.encode())]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        extra = page_headers if scope.get("path") in page_paths else api_headers

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                seen = {h[0].lower() for h in headers}
                for name_b, value_b in extra:
                    if name_b.lower() not in seen:
                        headers.append((name_b, value_b))
                        seen.add(name_b.lower())
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
