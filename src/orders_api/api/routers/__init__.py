"""
orders_api.api.routers

HTTP routers.

Responsibilities:
- `health`: liveness/readiness probes.
- `orders`: the order CRUD surface.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Routers are mounted in `orders_api.api.app.create_app`.
