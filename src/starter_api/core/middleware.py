"""Request middleware for tracing and access logging."""

from __future__ import annotations

import logging
import time
import uuid
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from starter_api.core.context import clear_trace_id, set_trace_id

if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

HEALTH_PATHS = frozenset({"/health"})


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware that establishes the per-request trace id.

    The id is taken from ``header`` or generated, stored on ``request.state``
    for the exception handlers, mirrored into the logging context and echoed
    back on the response.
    """

    def __init__(self, app: ASGIApp, *, header: str = "X-Request-ID", generate: bool = True) -> None:
        super().__init__(app)
        self.header = header
        self.generate = generate

    async def dispatch(self, request: Request, call_next) -> Response:
        trace_id = request.headers.get(self.header) or (str(uuid.uuid4()) if self.generate else None)
        request.state.trace_id = trace_id
        set_trace_id(trace_id)

        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception:
            # Rendered as a 500 by the catch-all handler further out
            self._log_access(request, 500, start_time)
            clear_trace_id()
            raise

        if trace_id:
            response.headers[self.header] = trace_id

        self._log_access(request, response.status_code, start_time)

        clear_trace_id()

        return response

    def _log_access(self, request: Request, status_code: int, start_time: float) -> None:
        if request.url.path in HEALTH_PATHS:
            return
        duration_ms = round((time.time() - start_time) * 1000)
        logger.info(
            "%s %s -> %s (%dms)",
            request.method,
            request.url.path,
            status_code,
            duration_ms,
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "duration_ms": duration_ms,
            },
        )
