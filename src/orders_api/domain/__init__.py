"""
orders_api.domain

Domain package.

Responsibilities:
- Order entity, status enum and the status transition table.
- Typed outcomes returned by the service layer.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing in this package imports FastAPI or pydantic; it is plain Python.
