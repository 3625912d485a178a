"""Application error taxonomy.

A closed set of failure categories split into client faults (4xx) and server
faults (5xx). Each variant is an immutable record; ``ApplicationException``
is the only thing actually raised and carries exactly one variant.

Business code signals failure through the factory functions below. They never
return, so they also work inside expressions::

    user = users.get(user_id) or not_found("User", user_id)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import NoReturn, TypeAlias


# ===== Client errors (4xx) =====


@dataclass(frozen=True)
class NotFound:
    """Resource not found (404)."""

    resource_type: str
    identifier: str


@dataclass(frozen=True)
class Validation:
    """Invalid input (400), optionally with per-field messages."""

    message: str
    field_errors: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "field_errors", MappingProxyType(dict(self.field_errors)))

    def __hash__(self) -> int:
        return hash((self.message, frozenset(self.field_errors.items())))


@dataclass(frozen=True)
class BadRequest:
    """Malformed or semantically invalid request (400)."""

    message: str


@dataclass(frozen=True)
class Conflict:
    """State conflict, e.g. duplicate resource (409)."""

    message: str


# ===== Server errors (5xx) =====


@dataclass(frozen=True)
class RemoteServiceError:
    """Remote collaborator unavailable or failed (503)."""

    service: str
    message: str


@dataclass(frozen=True)
class InternalError:
    """General system failure (500)."""

    message: str
    cause: BaseException | None = None


@dataclass(frozen=True)
class DatabaseError:
    """Database operation failed (500)."""

    operation: str
    message: str


ClientError: TypeAlias = NotFound | Validation | BadRequest | Conflict
ServerError: TypeAlias = RemoteServiceError | InternalError | DatabaseError
ApplicationError: TypeAlias = ClientError | ServerError


def is_client_error(error: ApplicationError) -> bool:
    return isinstance(error, ClientError)


def is_server_error(error: ApplicationError) -> bool:
    return isinstance(error, ServerError)


class ApplicationException(Exception):
    """Raisable carrier for a single ``ApplicationError``."""

    def __init__(self, error: ApplicationError) -> None:
        super().__init__(_describe(error))
        self.error = error


def _describe(error: ApplicationError) -> str:
    if isinstance(error, NotFound):
        return f"{error.resource_type} '{error.identifier}' not found"
    if isinstance(error, RemoteServiceError):
        return f"{error.service}: {error.message}"
    if isinstance(error, DatabaseError):
        return f"{error.operation}: {error.message}"
    return error.message


# ===== Factories =====


def not_found(resource_type: str, identifier: str) -> NoReturn:
    """Raise a NotFound error.

    Args:
        resource_type: Kind of resource, e.g. "User" or "Order".
        identifier: Identifier that was looked up.
    """
    raise ApplicationException(NotFound(resource_type, str(identifier)))


def validation_error(message: str, field_errors: Mapping[str, str] | None = None) -> NoReturn:
    """Raise a Validation error with optional field-level messages."""
    raise ApplicationException(Validation(message, field_errors or {}))


def bad_request(message: str) -> NoReturn:
    raise ApplicationException(BadRequest(message))


def conflict(message: str) -> NoReturn:
    raise ApplicationException(Conflict(message))


def remote_service_error(
    service: str, message: str, *, cause: BaseException | None = None
) -> NoReturn:
    """Raise a RemoteServiceError attributed to ``service``.

    Args:
        service: Logical name of the remote collaborator.
        message: Failure details.
        cause: Original exception, chained onto the raised one.
    """
    raise ApplicationException(RemoteServiceError(service, message)) from cause


def internal_error(message: str, cause: BaseException | None = None) -> NoReturn:
    """Raise an InternalError, keeping ``cause`` for server-side logging."""
    raise ApplicationException(InternalError(message, cause)) from cause


def database_error(operation: str, message: str) -> NoReturn:
    """Raise a DatabaseError.

    Args:
        operation: Operation that failed, e.g. "save", "update", "delete".
        message: Failure details.
    """
    raise ApplicationException(DatabaseError(operation, message))


def wrap_exception(message: str, cause: BaseException) -> NoReturn:
    """Re-raise an arbitrary exception as an InternalError.

    Useful in callbacks and comprehensions where a library error should not
    escape as-is.
    """
    internal_error(message, cause)
