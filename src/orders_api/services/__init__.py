"""
orders_api.services

Service-layer package.

Responsibilities:
- Hold the business rules of the order lifecycle.
- Translate store results into typed outcomes and read projections.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services are pure Python and tested directly against an isolated `OrderStore`.
