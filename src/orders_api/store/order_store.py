"""
orders_api.store.order_store

Thread-safe in-memory store for `Order` records.

Responsibilities:
- Assign ids from a monotonically increasing counter (never reused).
- Serialize every read/write behind one instance-scoped lock.
- Let callers group a check-then-act sequence under the same lock.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from orders_api.domain.models import Order


class OrderStore:
    def __init__(self) -> None:
        self._orders: dict[int, Order] = {}
        self._next_id = 1
        # Re-entrant so store calls made inside `exclusive()` do not deadlock.
        self._lock = threading.RLock()

    @contextmanager
    def exclusive(self) -> Iterator[OrderStore]:
        with self._lock:
            yield self

    def list(self) -> list[Order]:
        with self._lock:
            return list(self._orders.values())

    def get(self, order_id: int) -> Order | None:
        with self._lock:
            return self._orders.get(order_id)

    def insert(self, order: Order) -> Order:
        with self._lock:
            stored = order.with_changes(id=self._next_id)
            self._next_id += 1
            self._orders[stored.id] = stored
            return stored

    def replace(self, order_id: int, order: Order) -> Order | None:
        with self._lock:
            if order_id not in self._orders:
                return None
            stored = order.with_changes(id=order_id)
            self._orders[order_id] = stored
            return stored

    def remove(self, order_id: int) -> bool:
        with self._lock:
            return self._orders.pop(order_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._orders)


# --- Module Notes -----------------------------------------------------------
# Records are frozen dataclasses, so handing them out never exposes mutable
# store state.
