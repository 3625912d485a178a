"""Request Context.

``RequestContext`` is the explicit per-request value handed to the error
presenter. The trace id is also mirrored into a ``ContextVar`` so log
formatters can tag every record emitted while the request is in flight.
"""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from starlette.requests import Request

# Per-request correlation identifier for log enrichment
_trace_id_var: ContextVar[str | None] = ContextVar("trace_id", default=None)


@dataclass(frozen=True)
class RequestContext:
    """Ambient data the presenter attaches to a problem response."""

    path: str
    trace_id: str | None = None

    @classmethod
    def from_request(cls, request: Request) -> RequestContext:
        """Build from an inbound request; the trace id comes from the middleware."""
        trace_id = getattr(request.state, "trace_id", None)
        return cls(path=request.url.path, trace_id=trace_id or None)


def get_trace_id() -> str | None:
    """Get the current request's trace id."""
    return _trace_id_var.get()


def set_trace_id(trace_id: str | None) -> None:
    """Set the trace id for the current request context."""
    _trace_id_var.set(trace_id)


def clear_trace_id() -> None:
    """Clear the trace id (reset to default)."""
    _trace_id_var.set(None)
