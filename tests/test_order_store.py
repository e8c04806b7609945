"""
tests.test_order_store

In-memory store: id assignment, replace/remove semantics, locking.
"""

from __future__ import annotations

import threading
from decimal import Decimal

from orders_api.domain.models import Order, OrderStatus
from orders_api.store.order_store import OrderStore


def _order(name: str = "Alice") -> Order:
    return Order.new(customer_name=name, total_amount=Decimal("100.00"))


def test_insert_assigns_sequential_ids(store: OrderStore) -> None:
    first = store.insert(_order())
    second = store.insert(_order("Bob"))
    assert (first.id, second.id) == (1, 2)
    assert store.get(1) == first
    assert store.count() == 2


def test_ids_are_never_reused(store: OrderStore) -> None:
    first = store.insert(_order())
    assert store.remove(first.id) is True
    again = store.insert(_order())
    assert again.id == 2
    assert store.get(first.id) is None


def test_get_missing_returns_none(store: OrderStore) -> None:
    assert store.get(42) is None


def test_replace_keeps_id_and_does_not_upsert(store: OrderStore) -> None:
    stored = store.insert(_order())
    paid = stored.with_changes(status=OrderStatus.Paid, id=999)

    replaced = store.replace(stored.id, paid)
    assert replaced is not None
    assert replaced.id == stored.id
    assert store.get(stored.id).status is OrderStatus.Paid

    assert store.replace(77, paid) is None
    assert store.get(77) is None
    assert store.count() == 1


def test_remove_reports_whether_anything_was_deleted(store: OrderStore) -> None:
    stored = store.insert(_order())
    assert store.remove(stored.id) is True
    assert store.remove(stored.id) is False


def test_list_returns_a_snapshot(store: OrderStore) -> None:
    store.insert(_order())
    snapshot = store.list()
    store.insert(_order("Bob"))
    assert len(snapshot) == 1
    assert {o.customer_name for o in store.list()} == {"Alice", "Bob"}


def test_exclusive_is_reentrant(store: OrderStore) -> None:
    with store.exclusive() as locked:
        created = locked.insert(_order())
        assert locked.get(created.id) == created


def test_concurrent_inserts_get_unique_ids(store: OrderStore) -> None:
    per_thread = 200
    threads = [
        threading.Thread(target=lambda: [store.insert(_order()) for _ in range(per_thread)])
        for _ in range(8)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = sorted(o.id for o in store.list())
    assert ids == list(range(1, 8 * per_thread + 1))
