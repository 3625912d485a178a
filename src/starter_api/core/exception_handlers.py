"""Centralized exception handlers.

Every failure leaving a route funnels through here and is rendered as a
problem document. Starlette picks the handler by walking the exception's MRO,
so ``ApplicationException`` is always matched before the catch-all.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from starter_api.core.context import RequestContext
from starter_api.core.errors import ApplicationException
from starter_api.core.presenter import (
    present_application_error,
    present_binding_failure,
    present_http_error,
    present_type_mismatch,
    present_unexpected,
)

if TYPE_CHECKING:
    from fastapi import FastAPI
    from starlette.requests import Request
    from starlette.responses import JSONResponse

DEFAULT_TRACE_HEADER = "X-Request-ID"

# Parameter sources whose values are converted from raw strings
PARAMETER_LOCATIONS = frozenset({"query", "path", "header", "cookie"})

# pydantic error type -> user-facing type name
EXPECTED_TYPES: dict[str, str] = {
    "int_parsing": "int",
    "int_type": "int",
    "int_from_float": "int",
    "float_parsing": "float",
    "float_type": "float",
    "bool_parsing": "bool",
    "bool_type": "bool",
    "decimal_parsing": "Decimal",
    "decimal_type": "Decimal",
    "uuid_parsing": "UUID",
    "uuid_type": "UUID",
    "date_parsing": "date",
    "date_from_datetime_parsing": "date",
    "datetime_parsing": "datetime",
    "datetime_from_date_parsing": "datetime",
    "time_parsing": "time",
    "time_delta_parsing": "timedelta",
    "enum": "enum",
}


@dataclass(frozen=True)
class TypeMismatch:
    value: Any
    name: str
    expected_type: str | None


@dataclass(frozen=True)
class BindingFailure:
    field_errors: dict[str, str]


def classify_validation_error(errors: Sequence[dict[str, Any]]) -> TypeMismatch | BindingFailure:
    """Split FastAPI validation errors into a type mismatch or a binding failure.

    A conversion error on a query/path/header/cookie parameter is reported as a
    type mismatch (first one wins). Anything else becomes a binding failure with
    field errors keyed by dotted location.
    """
    for error in errors:
        loc = tuple(error.get("loc", ()))
        error_type = error.get("type", "")
        if len(loc) >= 2 and loc[0] in PARAMETER_LOCATIONS and _is_conversion_error(error_type):
            return TypeMismatch(
                value=error.get("input"),
                name=str(loc[1]),
                expected_type=EXPECTED_TYPES.get(error_type),
            )

    field_errors: dict[str, str] = {}
    for error in errors:
        field_errors[_field_name(tuple(error.get("loc", ())))] = error.get("msg", "Invalid value")
    return BindingFailure(field_errors=field_errors)


def _is_conversion_error(error_type: str) -> bool:
    return error_type in EXPECTED_TYPES or error_type.endswith("_parsing")


def _field_name(loc: tuple[Any, ...]) -> str:
    parts = loc[1:] if len(loc) > 1 and loc[0] in ("body", *PARAMETER_LOCATIONS) else loc
    return ".".join(str(part) for part in parts) or "request"


def register_exception_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application."""

    @app.exception_handler(ApplicationException)
    async def handle_application_exception(request: Request, exc: ApplicationException) -> JSONResponse:
        """Handle errors raised intentionally by business logic."""
        ctx = RequestContext.from_request(request)
        return present_application_error(exc.error, ctx).to_response()

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle request binding and parameter conversion failures."""
        ctx = RequestContext.from_request(request)
        outcome = classify_validation_error(exc.errors())
        if isinstance(outcome, TypeMismatch):
            problem = present_type_mismatch(outcome.value, outcome.name, outcome.expected_type, ctx)
        else:
            problem = present_binding_failure(outcome.field_errors, ctx)
        return problem.to_response()

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Handle framework HTTP exceptions with the same body shape."""
        ctx = RequestContext.from_request(request)
        problem = present_http_error(exc.status_code, str(exc.detail), ctx)
        return problem.to_response(headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        ctx = RequestContext.from_request(request)
        trace_header = getattr(app.state, "trace_header", DEFAULT_TRACE_HEADER)
        headers = {trace_header: ctx.trace_id} if ctx.trace_id else None
        return present_unexpected(exc, ctx).to_response(headers=headers)
