"""
orders_api.store

Storage package (in-memory, process lifetime).

Responsibilities:
- Own the collection of orders and the id counter.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# A durable backend can replace `OrderStore` as long as it keeps the same five
# operations and the `exclusive()` contract.
