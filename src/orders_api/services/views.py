"""
orders_api.services.views

Read-facing projection of an `Order`.

Responsibilities:
- Expose stored fields under their camelCase wire names.
- Derive presentation fields (status label, pt-BR money/date formatting).
"""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

from orders_api.domain.models import Order

ORDER_DATE_FORMAT = "%d/%m/%Y %H:%M:%S"
CENTS = Decimal("0.01")


def format_brl(amount: Decimal) -> str:
    # Midpoints round away from zero (2.345 -> 2,35), then "1,234.50" -> "1.234,50".
    grouped = f"{amount.quantize(CENTS, rounding=ROUND_HALF_UP):,.2f}"
    swapped = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"R$ {swapped}"


class OrderView(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int
    customer_name: str
    order_date: datetime
    total_amount: Decimal
    status: str
    status_description: str
    formatted_total_amount: str
    formatted_order_date: str

    @field_serializer("total_amount")
    def _amount_as_number(self, value: Decimal) -> float:
        return float(value)

    @classmethod
    def from_order(cls, order: Order) -> OrderView:
        return cls(
            id=order.id,
            customer_name=order.customer_name,
            order_date=order.order_date,
            total_amount=order.total_amount,
            status=order.status.name,
            status_description=order.status.label,
            formatted_total_amount=format_brl(order.total_amount),
            formatted_order_date=order.order_date.strftime(ORDER_DATE_FORMAT),
        )


# --- Module Notes -----------------------------------------------------------
# Projections are built fresh on every read; nothing here is stored.
