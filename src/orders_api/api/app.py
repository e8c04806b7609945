"""
orders_api.api.app

FastAPI app factory for the Orders API service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/handlers.
- Own the single `OrderStore` instance for the lifetime of the app.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from orders_api import __version__
from orders_api.api.errors import register_exception_handlers
from orders_api.api.routers.health import router as health_router
from orders_api.api.routers.orders import router as orders_router
from orders_api.observability.logging import configure_logging, get_logger
from orders_api.observability.middleware import RequestContextMiddleware
from orders_api.settings import Settings
from orders_api.store.order_store import OrderStore

log = get_logger(__name__)


def create_app(*, settings: Settings, store: OrderStore | None = None) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        env=settings.env,
        json_logs=settings.json_logs,
    )

    docs = settings.serve_docs

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, docs=docs)
        yield
        log.info("shutdown", orders_in_memory=app.state.store.count())

    app = FastAPI(
        lifespan=lifespan,
        title="Orders API",
        description="API para gerenciamento de pedidos",
        version=__version__,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
    )

    # Each app gets its own store; state is lost when the process exits.
    app.state.settings = settings
    app.state.store = store if store is not None else OrderStore()

    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(orders_router)

    return app


# --- Module Notes -----------------------------------------------------------
# Business logic stays in `services`; this module only wires components together.
