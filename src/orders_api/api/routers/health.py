"""
orders_api.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) that touches the order store.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from orders_api.api.deps import settings_dep, store_from_app
from orders_api.settings import Settings
from orders_api.store.order_store import OrderStore

router = APIRouter()


@router.get("/healthz")
async def healthz(settings: Settings = Depends(settings_dep)) -> dict[str, str]:
    # Liveness: process is up and serving HTTP.
    return {"status": "ok", "service": settings.service_name}


@router.get("/readyz")
async def readyz(store: OrderStore = Depends(store_from_app)) -> dict[str, Any]:
    # Readiness: the store lock can be taken and the collection read.
    return {"status": "ready", "orders": store.count()}


# --- Module Notes -----------------------------------------------------------
# Probes return plain JSON rather than the response envelope; orchestrators only
# look at the status code.
