"""
orders_api.api.responses

Response envelope shared by every endpoint.

Responsibilities:
- Define `ApiResponse[T]` (`success/message/data/timestamp/requestId`).
- Map service outcomes onto HTTP status codes.
- Render envelopes as JSON responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.status import (
    HTTP_200_OK,
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from orders_api.domain.models import utcnow
from orders_api.domain.outcomes import ErrorKind, Failure, Outcome
from orders_api.observability.middleware import request_id_of

T = TypeVar("T")

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.invalid_input: HTTP_400_BAD_REQUEST,
    ErrorKind.invalid_transition: HTTP_400_BAD_REQUEST,
    ErrorKind.not_found: HTTP_404_NOT_FOUND,
    ErrorKind.unexpected: HTTP_500_INTERNAL_SERVER_ERROR,
}


class ApiResponse(BaseModel, Generic[T]):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool
    message: str
    data: T | None = None
    timestamp: datetime = Field(default_factory=utcnow)
    request_id: str | None = None


def envelope(
    request: Request,
    *,
    success: bool,
    message: str,
    data: Any = None,
    status_code: int = HTTP_200_OK,
) -> JSONResponse:
    body = ApiResponse[Any](
        success=success,
        message=message,
        data=data,
        request_id=request_id_of(request),
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
    )


def error_envelope(request: Request, *, message: str, status_code: int) -> JSONResponse:
    return envelope(request, success=False, message=message, status_code=status_code)


def from_outcome(
    request: Request,
    outcome: Outcome[Any],
    *,
    message: str,
    status_code: int = HTTP_200_OK,
) -> JSONResponse:
    if isinstance(outcome, Failure):
        return error_envelope(
            request,
            message=outcome.error.message,
            status_code=STATUS_BY_KIND[outcome.kind],
        )
    return envelope(
        request, success=True, message=message, data=outcome.value, status_code=status_code
    )


# --- Module Notes -----------------------------------------------------------
# Envelopes are rendered by hand (not via `response_model`) so success and
# failure responses share exactly one serialization path.
