"""
orders_api.api.errors

Exception handlers for the HTTP boundary.

Responsibilities:
- Render malformed requests (body or path) as 400 envelopes.
- Wrap framework HTTP errors (unknown route, wrong method) in the envelope.
- Turn any unhandled exception into a generic 500 without leaking details.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from orders_api.api.responses import error_envelope
from orders_api.domain.outcomes import ErrorKind
from orders_api.observability.logging import get_logger
from orders_api.observability.middleware import REQUEST_ID_HEADER, request_id_of

log = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors():
        # Drop the "body"/"path" prefix FastAPI puts in front of every location.
        loc = [str(p) for p in err.get("loc", ())[1:]]
        where = ".".join(loc)
        parts.append(f"{where}: {err.get('msg')}" if where else str(err.get("msg")))
    return "Dados inválidos: " + ", ".join(parts)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _describe_validation_errors(exc)
    log.warning("request_rejected", kind=ErrorKind.invalid_input.value, reason=message)
    return error_envelope(request, message=message, status_code=HTTP_400_BAD_REQUEST)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_envelope(request, message=str(exc.detail), status_code=exc.status_code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Runs outside the request-context middleware, so bind the id explicitly.
    request_id = request_id_of(request)
    log.error(
        "unhandled_exception",
        kind=ErrorKind.unexpected.value,
        request_id=request_id,
        path=request.url.path,
        method=request.method,
        exc_info=exc,
    )
    response = error_envelope(
        request, message=INTERNAL_ERROR_MESSAGE, status_code=HTTP_500_INTERNAL_SERVER_ERROR
    )
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


# --- Module Notes -----------------------------------------------------------
# Expected business failures never reach these handlers: the order router maps
# `Failure` outcomes itself (see `api.responses.from_outcome`).
