"""
orders_api.api.routers.orders

Order CRUD endpoints.

Responsibilities:
- Parse request bodies/paths into service calls.
- Map service outcomes onto the response envelope and HTTP status codes.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel
from starlette.responses import JSONResponse
from starlette.status import HTTP_201_CREATED

from orders_api.api.deps import order_service
from orders_api.api.responses import ApiResponse, from_outcome
from orders_api.domain.models import OrderStatus, parse_status
from orders_api.services.order_service import OrderService
from orders_api.services.views import OrderView

router = APIRouter(prefix="/orders", tags=["orders"])

MAX_AMOUNT_DIGITS = 15

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ApiResponse[None], "description": "Invalid input or status transition"},
    404: {"model": ApiResponse[None], "description": "Order not found"},
    500: {"model": ApiResponse[None], "description": "Unexpected server error"},
}


def _strict_status(value: Any) -> OrderStatus:
    # Enum name ("Paid") or wire integer (1); never a bool, float or numeric string.
    status = parse_status(value)
    if status is None:
        raise ValueError("Status deve ser um valor válido")
    return status


class CreateOrderRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    customer_name: str
    # JSON numbers arrive as floats; beyond 15 significant digits they are no
    # longer exact, so larger amounts are refused instead of silently rounded.
    total_amount: Annotated[Decimal, Field(max_digits=MAX_AMOUNT_DIGITS)]


class UpdateOrderRequest(CreateOrderRequest):
    status: Annotated[OrderStatus, BeforeValidator(_strict_status)]


@router.get("", response_model=ApiResponse[list[OrderView]], responses=_ERROR_RESPONSES)
async def list_orders(
    request: Request,
    svc: OrderService = Depends(order_service),
) -> JSONResponse:
    return from_outcome(request, svc.list_orders(), message="Pedidos recuperados com sucesso")


@router.get("/{order_id}", response_model=ApiResponse[OrderView], responses=_ERROR_RESPONSES)
async def get_order(
    request: Request,
    order_id: int,
    svc: OrderService = Depends(order_service),
) -> JSONResponse:
    return from_outcome(request, svc.get_order(order_id), message="Pedido encontrado com sucesso")


@router.post(
    "",
    status_code=HTTP_201_CREATED,
    response_model=ApiResponse[OrderView],
    responses=_ERROR_RESPONSES,
)
async def create_order(
    request: Request,
    body: CreateOrderRequest,
    svc: OrderService = Depends(order_service),
) -> JSONResponse:
    outcome = svc.create_order(customer_name=body.customer_name, total_amount=body.total_amount)
    response = from_outcome(
        request, outcome, message="Pedido criado com sucesso", status_code=HTTP_201_CREATED
    )
    if response.status_code == HTTP_201_CREATED:
        response.headers["location"] = str(
            request.url_for("get_order", order_id=outcome.value.id)
        )
    return response


@router.put("/{order_id}", response_model=ApiResponse[OrderView], responses=_ERROR_RESPONSES)
async def update_order(
    request: Request,
    order_id: int,
    body: UpdateOrderRequest,
    svc: OrderService = Depends(order_service),
) -> JSONResponse:
    outcome = svc.update_order(
        order_id,
        customer_name=body.customer_name,
        total_amount=body.total_amount,
        status=body.status,
    )
    return from_outcome(request, outcome, message="Pedido atualizado com sucesso")


@router.delete("/{order_id}", response_model=ApiResponse[bool], responses=_ERROR_RESPONSES)
async def delete_order(
    request: Request,
    order_id: int,
    svc: OrderService = Depends(order_service),
) -> JSONResponse:
    return from_outcome(request, svc.delete_order(order_id), message="Pedido excluído com sucesso")


# --- Module Notes -----------------------------------------------------------
# `response_model` here only documents the envelope in OpenAPI; handlers return
# pre-rendered `JSONResponse`s from `api.responses`.
