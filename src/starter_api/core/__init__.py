"""Core module for configuration, context, middleware, and errors."""

from starter_api.core.config import Settings, settings
from starter_api.core.context import (
    RequestContext,
    clear_trace_id,
    get_trace_id,
    set_trace_id,
)
from starter_api.core.errors import (
    ApplicationError,
    ApplicationException,
    BadRequest,
    ClientError,
    Conflict,
    DatabaseError,
    InternalError,
    NotFound,
    RemoteServiceError,
    ServerError,
    Validation,
    bad_request,
    conflict,
    database_error,
    internal_error,
    not_found,
    remote_service_error,
    validation_error,
    wrap_exception,
)
from starter_api.core.exception_handlers import register_exception_handlers
from starter_api.core.logging_config import configure_logging
from starter_api.core.middleware import RequestContextMiddleware
from starter_api.core.problem import ProblemResponse

__all__ = [
    # Errors
    "ApplicationError",
    "ApplicationException",
    "BadRequest",
    "ClientError",
    "Conflict",
    "DatabaseError",
    "InternalError",
    "NotFound",
    "RemoteServiceError",
    "ServerError",
    "Validation",
    "bad_request",
    "conflict",
    "database_error",
    "internal_error",
    "not_found",
    "remote_service_error",
    "validation_error",
    "wrap_exception",
    # Presentation
    "ProblemResponse",
    "register_exception_handlers",
    # Context
    "RequestContext",
    "clear_trace_id",
    "get_trace_id",
    "set_trace_id",
    # Middleware
    "RequestContextMiddleware",
    # Logging
    "configure_logging",
    # Config
    "Settings",
    "settings",
]
