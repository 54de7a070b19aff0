"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"


async def test_readiness_without_database_returns_503(client: AsyncClient) -> None:
    """GET /api/v1/health/ready is 503 when DATABASE_URL is not set."""
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "not_ready"
    assert "DATABASE_URL" in data["message"]


async def test_root_returns_html(client: AsyncClient) -> None:
    """GET / returns HTML landing page."""
    response = await client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers.get("content-type", "")
    assert "/api/v1/flowStats/" in response.text


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    """A safe client X-Request-ID is echoed; the correlation id falls back to it."""
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["x-request-id"] == "abc-123"
    assert response.headers["x-correlation-id"] == "abc-123"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    """A request id with characters unsafe for logs is replaced by a UUID."""
    response = await client.get(
        "/api/v1/health", headers={"X-Request-ID": "bad id; drop"}
    )
    assert response.headers["x-request-id"] != "bad id; drop"
    assert len(response.headers["x-request-id"]) == 36


async def test_security_headers(client: AsyncClient) -> None:
    """API responses carry the locked-down CSP; the landing page a relaxed one."""
    api = await client.get("/api/v1/health")
    assert api.headers["x-content-type-options"] == "nosniff"
    assert api.headers["content-security-policy"].startswith("default-src 'none'")
    page = await client.get("/")
    assert page.headers["content-security-policy"].startswith("default-src 'self'")
