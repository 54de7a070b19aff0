"""Tests for the traced decorator (no tracer provider configured)."""

import pytest

from app.shared.telemetry.tracing import traced


async def test_traced_async_returns_result() -> None:
    @traced("test.async")
    async def double(x: int) -> int:
        return 2 * x

    assert await double(4) == 8


def test_traced_sync_reraises() -> None:
    @traced()
    def boom(cluster: str) -> None:
        raise RuntimeError(cluster)

    with pytest.raises(RuntimeError, match="c1"):
        boom(cluster="c1")
    assert boom.__name__ == "boom"
