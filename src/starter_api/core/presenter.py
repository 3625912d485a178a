"""Error presenter.

Translates application errors and a few framework failures into
``ProblemResponse`` values. Every function here is pure apart from emitting
one ERROR log record; nothing reads global request state.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, assert_never

from starter_api.core.context import RequestContext
from starter_api.core.errors import (
    ApplicationError,
    BadRequest,
    Conflict,
    DatabaseError,
    InternalError,
    NotFound,
    RemoteServiceError,
    Validation,
)
from starter_api.core.problem import ProblemResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "An internal error occurred. Please contact support."
UNEXPECTED_ERROR_DETAIL = "An unexpected error occurred. Please try again later."
VALIDATION_FAILED_DETAIL = "Validation failed"


def present_application_error(error: ApplicationError, ctx: RequestContext) -> ProblemResponse:
    """Map an application error to its problem response.

    The match is exhaustive over ``ApplicationError``; a new variant without a
    case here fails type checking at ``assert_never``.
    """
    match error:
        case NotFound(resource_type=resource_type, identifier=identifier):
            _log("NotFound", 404, ctx, "Resource not found")
            return _build(
                404,
                f"{resource_type} with identifier '{identifier}' not found",
                ctx,
                resourceType=resource_type,
                identifier=identifier,
            )
        case Validation(message=message, field_errors=field_errors):
            _log("Validation", 400, ctx, "Validation error")
            extras = {"fieldErrors": dict(field_errors)} if field_errors else {}
            return _build(400, message, ctx, **extras)
        case BadRequest(message=message):
            _log("BadRequest", 400, ctx, "Bad request")
            return _build(400, message, ctx)
        case Conflict(message=message):
            _log("Conflict", 409, ctx, "Conflict")
            return _build(409, message, ctx)
        case RemoteServiceError(service=service, message=message):
            _log("RemoteServiceError", 503, ctx, "Remote service error", service=service)
            return _build(
                503,
                f"Service '{service}' is currently unavailable: {message}",
                ctx,
                service=service,
            )
        case InternalError(message=message, cause=cause):
            # Full chain server side only; callers get the fixed detail.
            _log("InternalError", 500, ctx, "Internal error: %s", message, exc_info=cause)
            return _build(500, INTERNAL_ERROR_DETAIL, ctx)
        case DatabaseError(operation=operation, message=message):
            _log("DatabaseError", 500, ctx, "Database error during %s: %s", operation, message)
            return _build(500, f"Database operation '{operation}' failed", ctx, operation=operation)
        case _:
            assert_never(error)


def present_binding_failure(field_errors: Mapping[str, str], ctx: RequestContext) -> ProblemResponse:
    """Request body or parameters failed validation."""
    _log("BindingFailure", 400, ctx, "Validation failed")
    return _build(400, VALIDATION_FAILED_DETAIL, ctx, fieldErrors=dict(field_errors))


def present_type_mismatch(
    value: Any, name: str, expected_type: str | None, ctx: RequestContext
) -> ProblemResponse:
    """A request parameter could not be converted to its declared type."""
    _log("TypeMismatch", 400, ctx, "Type mismatch")
    detail = (
        f"Invalid value '{value}' for parameter '{name}'. "
        f"Expected type: {expected_type or 'unknown'}"
    )
    return _build(400, detail, ctx)


def present_http_error(status: int, detail: str, ctx: RequestContext) -> ProblemResponse:
    """Framework-raised HTTP errors such as an unknown route or method."""
    _log("HttpError", status, ctx, "HTTP error %d", status)
    return _build(status, detail, ctx)


def present_unexpected(exc: BaseException, ctx: RequestContext) -> ProblemResponse:
    """Last-resort mapping for anything outside the known taxonomy."""
    _log("Unhandled", 500, ctx, "Unhandled exception", exc_info=exc)
    return _build(500, UNEXPECTED_ERROR_DETAIL, ctx)


def _build(status: int, detail: str, ctx: RequestContext, **properties: Any) -> ProblemResponse:
    return ProblemResponse(
        status=status,
        detail=detail,
        path=ctx.path,
        trace_id=ctx.trace_id or None,
        properties=properties,
    )


def _log(
    category: str,
    status: int,
    ctx: RequestContext,
    msg: str,
    *args: Any,
    exc_info: BaseException | None = None,
    **extra: Any,
) -> None:
    logger.error(
        msg,
        *args,
        exc_info=exc_info,
        extra={"error_category": category, "status_code": status, "path": ctx.path, **extra},
    )
