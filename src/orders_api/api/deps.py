"""
orders_api.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, the order store and the service.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

from fastapi import Depends, Request

from orders_api.services.order_service import OrderService
from orders_api.settings import Settings
from orders_api.store.order_store import OrderStore


def settings_dep(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[attr-defined]


def store_from_app(request: Request) -> OrderStore:
    # The store is created once per app in `orders_api.api.app.create_app`.
    return request.app.state.store  # type: ignore[attr-defined]


def order_service(store: OrderStore = Depends(store_from_app)) -> OrderService:
    # The service is stateless; building one per request is cheap.
    return OrderService(store=store)


# --- Module Notes -----------------------------------------------------------
# Tests inject their own `OrderStore` through `create_app(store=...)` rather than
# overriding these dependencies.
