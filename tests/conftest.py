"""
tests.conftest

Shared fixtures.

Responsibilities:
- Give every test an isolated `OrderStore` and `OrderService`.
- Provide an httpx client bound to an app built around that store.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from orders_api.api.app import create_app
from orders_api.services.order_service import OrderService
from orders_api.settings import Settings
from orders_api.store.order_store import OrderStore


@pytest.fixture()
def store() -> OrderStore:
    return OrderStore()


@pytest.fixture()
def service(store: OrderStore) -> OrderService:
    return OrderService(store=store)


@pytest.fixture()
def app(store: OrderStore):
    return create_app(settings=Settings(env="test"), store=store)


@pytest_asyncio.fixture()
async def client(app) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


# --- Module Notes -----------------------------------------------------------
# ASGITransport does not run the lifespan; the store is created eagerly by
# `create_app`, so no startup hook is needed for these tests.
