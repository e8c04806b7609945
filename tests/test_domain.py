"""
tests.test_domain

Order status table and entity rules.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from orders_api.domain.models import (
    ALLOWED_TRANSITIONS,
    STATUS_LABELS,
    TERMINAL_STATUSES,
    Order,
    OrderStatus,
    can_transition,
    parse_status,
)

LEGAL = {
    (OrderStatus.Created, OrderStatus.Paid),
    (OrderStatus.Created, OrderStatus.Cancelled),
    (OrderStatus.Paid, OrderStatus.Shipped),
    (OrderStatus.Paid, OrderStatus.Cancelled),
}


@pytest.mark.parametrize("current", list(OrderStatus))
@pytest.mark.parametrize("new", list(OrderStatus))
def test_transition_table_is_exhaustive(current: OrderStatus, new: OrderStatus) -> None:
    assert can_transition(current, new) is ((current, new) in LEGAL)


def test_wire_values_and_labels() -> None:
    assert [s.value for s in OrderStatus] == [0, 1, 2, 3]
    assert STATUS_LABELS == {
        OrderStatus.Created: "Criado",
        OrderStatus.Paid: "Pago",
        OrderStatus.Shipped: "Enviado",
        OrderStatus.Cancelled: "Cancelado",
    }
    assert OrderStatus.Shipped.label == "Enviado"
    assert set(ALLOWED_TRANSITIONS) == set(OrderStatus)


def test_terminal_statuses() -> None:
    assert TERMINAL_STATUSES == {OrderStatus.Shipped, OrderStatus.Cancelled}


def test_new_order_starts_created() -> None:
    order = Order.new(customer_name="Alice", total_amount=Decimal("10"))
    assert order.status is OrderStatus.Created
    assert order.id == 0
    assert order.order_date.tzinfo is not None
    assert order.can_be_deleted()
    assert order.can_be_paid()
    assert order.can_be_cancelled()
    assert not order.can_be_shipped()


def test_status_helpers_follow_table() -> None:
    paid = Order.new(customer_name="Alice", total_amount=Decimal("10")).with_changes(
        status=OrderStatus.Paid
    )
    assert paid.can_be_shipped()
    assert paid.can_be_cancelled()
    assert not paid.can_be_paid()
    assert not paid.can_be_deleted()
    assert not paid.is_terminal

    shipped = paid.with_changes(status=OrderStatus.Shipped)
    assert shipped.is_terminal
    assert not shipped.can_be_cancelled()


@pytest.mark.parametrize(
    "name, amount, valid",
    [
        ("Alice", Decimal("0.01"), True),
        ("   ", Decimal("1"), False),
        ("", Decimal("1"), False),
        ("A" * 100, Decimal("1"), True),
        ("A" * 101, Decimal("1"), False),
        ("Alice", Decimal("0"), False),
        ("Alice", Decimal("-5"), False),
    ],
)
def test_is_valid(name: str, amount: Decimal, valid: bool) -> None:
    assert Order(customer_name=name, total_amount=amount).is_valid() is valid


def test_orders_are_immutable() -> None:
    order = Order.new(customer_name="Alice", total_amount=Decimal("10"))
    with pytest.raises(AttributeError):
        order.status = OrderStatus.Paid  # type: ignore[misc]


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Paid", OrderStatus.Paid),
        (1, OrderStatus.Paid),
        (OrderStatus.Shipped, OrderStatus.Shipped),
        (True, None),
        (False, None),
        (1.0, None),
        ("1", None),
        ("paid", None),
        (9, None),
        (None, None),
    ],
)
def test_parse_status(value: object, expected: OrderStatus | None) -> None:
    assert parse_status(value) is expected
