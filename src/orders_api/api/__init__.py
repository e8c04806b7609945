"""
orders_api.api

API package for the Orders service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring, response envelope and error mapping.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: request parsing + delegation to `OrderService` +
# mapping outcomes onto HTTP.
