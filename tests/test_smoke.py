"""
tests.test_smoke

Minimal smoke tests to validate the service can boot and serve core endpoints.

Responsibilities:
- Ensure the FastAPI app starts and the liveness/readiness probes work in test mode.
- Ensure docs are hidden in prod.
"""

from __future__ import annotations

import httpx
import pytest

from orders_api.api.app import create_app
from orders_api.settings import Settings


@pytest.mark.asyncio
async def test_health_endpoints(client: httpx.AsyncClient) -> None:
    r = await client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"

    r = await client.get("/readyz")
    assert r.status_code == 200
    assert r.json() == {"status": "ready", "orders": 0}

    await client.post("/orders", json={"customerName": "Alice", "totalAmount": 10})
    r = await client.get("/readyz")
    assert r.json()["orders"] == 1


@pytest.mark.asyncio
async def test_docs_follow_environment() -> None:
    for env, expected in (("dev", 200), ("prod", 404)):
        app = create_app(settings=Settings(env=env))
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.get("/openapi.json")
            assert r.status_code == expected


@pytest.mark.asyncio
async def test_docs_override() -> None:
    app = create_app(settings=Settings(env="prod", docs_enabled=True))
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        r = await client.get("/openapi.json")
        assert r.status_code == 200
        assert "/orders/{order_id}" in r.json()["paths"]


# --- Module Notes -----------------------------------------------------------
# Order behavior is covered in test_orders_api.py and test_order_service.py.
