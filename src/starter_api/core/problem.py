"""RFC 7807 problem documents."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from http import HTTPStatus
from types import MappingProxyType
from typing import Any

from starlette.responses import JSONResponse

PROBLEM_MEDIA_TYPE = "application/problem+json"
TRACE_ID_KEY = "traceId"


@dataclass(frozen=True)
class ProblemResponse:
    """Structured error body returned to callers.

    Built once per failed request and serialized straight to the response.
    """

    status: int
    detail: str
    path: str
    trace_id: str | None = None
    properties: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @property
    def title(self) -> str:
        try:
            return HTTPStatus(self.status).phrase
        except ValueError:
            return "Error"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-ready problem document."""
        body: dict[str, Any] = {
            "type": "about:blank",
            "title": self.title,
            "status": self.status,
            "detail": self.detail,
            "path": self.path,
        }
        if self.trace_id:
            body[TRACE_ID_KEY] = self.trace_id
        for key, value in self.properties.items():
            body[key] = dict(value) if isinstance(value, Mapping) else value
        return body

    def to_response(self, headers: Mapping[str, str] | None = None) -> JSONResponse:
        return JSONResponse(
            status_code=self.status,
            content=self.to_dict(),
            media_type=PROBLEM_MEDIA_TYPE,
            headers=dict(headers) if headers else None,
        )
