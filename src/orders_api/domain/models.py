"""
orders_api.domain.models

Order entity and lifecycle rules.

Responsibilities:
- Define `OrderStatus` with its stable wire values and display labels.
- Define the exhaustive status transition table.
- Define the immutable `Order` record held by the store.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from decimal import Decimal

CUSTOMER_NAME_MAX_LENGTH = 100


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(enum.IntEnum):
    # Integer values are the wire contract; never renumber.
    Created = 0
    Paid = 1
    Shipped = 2
    Cancelled = 3

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


STATUS_LABELS: dict[OrderStatus, str] = {
    OrderStatus.Created: "Criado",
    OrderStatus.Paid: "Pago",
    OrderStatus.Shipped: "Enviado",
    OrderStatus.Cancelled: "Cancelado",
}

# Exhaustive: anything not listed (self-transitions included) is rejected.
ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.Created: frozenset({OrderStatus.Paid, OrderStatus.Cancelled}),
    OrderStatus.Paid: frozenset({OrderStatus.Shipped, OrderStatus.Cancelled}),
    OrderStatus.Shipped: frozenset(),
    OrderStatus.Cancelled: frozenset(),
}

TERMINAL_STATUSES: frozenset[OrderStatus] = frozenset(
    status for status, targets in ALLOWED_TRANSITIONS.items() if not targets
)


def can_transition(current: OrderStatus, new: OrderStatus) -> bool:
    return new in ALLOWED_TRANSITIONS.get(current, frozenset())


def parse_status(value: object) -> OrderStatus | None:
    """
    Resolve a status from its enum name ("Paid") or wire integer (1).

    Booleans, floats and numeric strings are rejected; `True == 1` must not
    read as Paid.
    """
    if isinstance(value, OrderStatus):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return OrderStatus.__members__.get(value)
    if isinstance(value, int):
        try:
            return OrderStatus(value)
        except ValueError:
            return None
    return None


@dataclass(frozen=True, slots=True)
class Order:
    """
    A customer purchase record.

    `id` is 0 until the store assigns one on insert. Instances are immutable;
    updates build a new record via `with_changes`.
    """

    customer_name: str
    total_amount: Decimal
    status: OrderStatus = OrderStatus.Created
    order_date: datetime = field(default_factory=utcnow)
    id: int = 0

    @classmethod
    def new(cls, *, customer_name: str, total_amount: Decimal) -> Order:
        # New orders always start in Created, dated now.
        return cls(
            customer_name=customer_name,
            total_amount=total_amount,
            status=OrderStatus.Created,
            order_date=utcnow(),
        )

    def with_changes(self, **changes) -> Order:
        return replace(self, **changes)

    def is_valid(self) -> bool:
        return (
            bool(self.customer_name and self.customer_name.strip())
            and len(self.customer_name) <= CUSTOMER_NAME_MAX_LENGTH
            and self.total_amount > 0
        )

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def can_transition_to(self, new: OrderStatus) -> bool:
        return can_transition(self.status, new)

    def can_be_paid(self) -> bool:
        return self.can_transition_to(OrderStatus.Paid)

    def can_be_shipped(self) -> bool:
        return self.can_transition_to(OrderStatus.Shipped)

    def can_be_cancelled(self) -> bool:
        return self.can_transition_to(OrderStatus.Cancelled)

    def can_be_deleted(self) -> bool:
        # Only orders that were never paid may be removed.
        return self.status is OrderStatus.Created


# --- Module Notes -----------------------------------------------------------
# Labels live in an explicit table rather than on enum metadata so the mapping
# is greppable and trivially testable.
