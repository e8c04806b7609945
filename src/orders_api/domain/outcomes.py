"""
orders_api.domain.outcomes

Typed outcomes for order lifecycle operations.

Responsibilities:
- Classify expected failures (`ErrorKind`) without raising.
- Provide `Success` / `Failure` values the API layer must branch on.
- Build the user-facing messages for each failure.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar

from orders_api.domain.models import CUSTOMER_NAME_MAX_LENGTH, OrderStatus

T = TypeVar("T")


class ErrorKind(enum.StrEnum):
    invalid_input = "INVALID_INPUT"
    not_found = "NOT_FOUND"
    invalid_transition = "INVALID_TRANSITION"
    unexpected = "UNEXPECTED"


@dataclass(frozen=True, slots=True)
class OrderError:
    kind: ErrorKind
    message: str
    field: str | None = None
    order_id: int | None = None
    current: OrderStatus | None = None
    attempted: OrderStatus | None = None

    @classmethod
    def invalid_id(cls, order_id: int) -> OrderError:
        return cls(
            kind=ErrorKind.invalid_input,
            message="ID do pedido é inválido",
            field="id",
            order_id=order_id,
        )

    @classmethod
    def blank_name(cls) -> OrderError:
        return cls(
            kind=ErrorKind.invalid_input,
            message="Nome do cliente é obrigatório",
            field="customerName",
        )

    @classmethod
    def name_too_long(cls) -> OrderError:
        return cls(
            kind=ErrorKind.invalid_input,
            message=(
                f"Nome do cliente deve ter no máximo {CUSTOMER_NAME_MAX_LENGTH} caracteres"
            ),
            field="customerName",
        )

    @classmethod
    def non_positive_amount(cls) -> OrderError:
        return cls(
            kind=ErrorKind.invalid_input,
            message="Valor total deve ser maior que zero",
            field="totalAmount",
        )

    @classmethod
    def invalid_status(cls) -> OrderError:
        return cls(
            kind=ErrorKind.invalid_input,
            message="Status deve ser um valor válido",
            field="status",
        )

    @classmethod
    def invalid_order(cls) -> OrderError:
        # Record-level check on the built Order, after the per-field checks.
        return cls(kind=ErrorKind.invalid_input, message="Dados do pedido são inválidos")

    @classmethod
    def not_found(cls, order_id: int) -> OrderError:
        return cls(
            kind=ErrorKind.not_found,
            message=f"Pedido com ID {order_id} não foi encontrado",
            order_id=order_id,
        )

    @classmethod
    def transition(
        cls, order_id: int, current: OrderStatus, attempted: OrderStatus
    ) -> OrderError:
        return cls(
            kind=ErrorKind.invalid_transition,
            message=(
                f"Não é possível alterar o status de '{current.label}' para "
                f"'{attempted.label}'. Consulte as regras de transição de status."
            ),
            order_id=order_id,
            current=current,
            attempted=attempted,
        )

    @classmethod
    def cannot_delete(cls, order_id: int, current: OrderStatus) -> OrderError:
        # Deletion counts as a move to Cancelled; only Created allows it.
        return cls(
            kind=ErrorKind.invalid_transition,
            message=f"Não é possível excluir um pedido com status '{current.label}'",
            order_id=order_id,
            current=current,
            attempted=OrderStatus.Cancelled,
        )


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Failure:
    error: OrderError

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


Outcome = Success[T] | Failure


# --- Module Notes -----------------------------------------------------------
# `unexpected` is never produced by the service; it exists so the API layer can
# describe unhandled exceptions with the same vocabulary.
