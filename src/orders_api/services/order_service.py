"""
orders_api.services.order_service

Order lifecycle service (business rules owner).

Responsibilities:
- Validate ids and order fields before touching the store.
- Enforce the status transition table on update and the Created-only rule on delete.
- Return `Success`/`Failure` outcomes; never raise for expected failures.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from orders_api.domain.models import CUSTOMER_NAME_MAX_LENGTH, Order, parse_status
from orders_api.domain.outcomes import Failure, OrderError, Outcome, Success
from orders_api.observability.logging import get_logger
from orders_api.services.views import OrderView
from orders_api.store.order_store import OrderStore

log = get_logger(__name__)


def _as_decimal(value: Any) -> Decimal | None:
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None


def validate_order_id(order_id: int) -> OrderError | None:
    if order_id <= 0:
        return OrderError.invalid_id(order_id)
    return None


def validate_order_fields(customer_name: str | None, total_amount: Any) -> OrderError | None:
    if customer_name is None or not customer_name.strip():
        return OrderError.blank_name()
    if len(customer_name) > CUSTOMER_NAME_MAX_LENGTH:
        return OrderError.name_too_long()
    amount = _as_decimal(total_amount)
    if amount is None or not amount.is_finite() or amount <= 0:
        return OrderError.non_positive_amount()
    return None


class OrderService:
    def __init__(self, *, store: OrderStore) -> None:
        self._store = store

    def list_orders(self) -> Outcome[list[OrderView]]:
        orders = self._store.list()
        log.info("orders_listed", count=len(orders))
        return Success([OrderView.from_order(o) for o in orders])

    def get_order(self, order_id: int) -> Outcome[OrderView]:
        if (err := validate_order_id(order_id)) is not None:
            return self._reject(err)

        order = self._store.get(order_id)
        if order is None:
            return self._reject(OrderError.not_found(order_id))
        return Success(OrderView.from_order(order))

    def create_order(self, *, customer_name: str, total_amount: Any) -> Outcome[OrderView]:
        if (err := validate_order_fields(customer_name, total_amount)) is not None:
            return self._reject(err)

        order = Order.new(customer_name=customer_name, total_amount=_as_decimal(total_amount))
        if not order.is_valid():
            return self._reject(OrderError.invalid_order())
        created = self._store.insert(order)
        log.info("order_created", order_id=created.id)
        return Success(OrderView.from_order(created))

    def update_order(
        self,
        order_id: int,
        *,
        customer_name: str,
        total_amount: Any,
        status: Any,
    ) -> Outcome[OrderView]:
        if (err := validate_order_id(order_id)) is not None:
            return self._reject(err)
        if (err := validate_order_fields(customer_name, total_amount)) is not None:
            return self._reject(err)
        new_status = parse_status(status)
        if new_status is None:
            return self._reject(OrderError.invalid_status())

        # Check and write under one lock so a concurrent update cannot slip in
        # between reading the current status and replacing the record.
        with self._store.exclusive() as store:
            current = store.get(order_id)
            if current is None:
                return self._reject(OrderError.not_found(order_id))
            if not current.can_transition_to(new_status):
                return self._reject(OrderError.transition(order_id, current.status, new_status))

            updated = current.with_changes(
                customer_name=customer_name,
                total_amount=_as_decimal(total_amount),
                status=new_status,
            )
            if not updated.is_valid():
                return self._reject(OrderError.invalid_order())
            stored = store.replace(order_id, updated)

        if stored is None:
            raise RuntimeError(f"order {order_id} vanished during update")
        log.info(
            "order_updated",
            order_id=order_id,
            from_status=current.status.name,
            to_status=new_status.name,
        )
        return Success(OrderView.from_order(stored))

    def delete_order(self, order_id: int) -> Outcome[bool]:
        if (err := validate_order_id(order_id)) is not None:
            return self._reject(err)

        with self._store.exclusive() as store:
            current = store.get(order_id)
            if current is None:
                return self._reject(OrderError.not_found(order_id))
            if not current.can_be_deleted():
                return self._reject(OrderError.cannot_delete(order_id, current.status))
            removed = store.remove(order_id)

        if not removed:
            raise RuntimeError(f"order {order_id} vanished during delete")
        log.info("order_deleted", order_id=order_id)
        return Success(True)

    def _reject(self, error: OrderError) -> Failure:
        log.warning(
            "order_request_rejected",
            kind=error.kind.value,
            order_id=error.order_id,
            field=error.field,
            reason=error.message,
        )
        return Failure(error)


# --- Module Notes -----------------------------------------------------------
# The store lock is re-entrant: `store.get`/`store.replace` inside `exclusive()`
# reacquire it without blocking.
