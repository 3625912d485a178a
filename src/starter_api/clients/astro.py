"""Client for the open-notify "who is in space" feed."""

from __future__ import annotations

import httpx

from starter_api.clients.base import ServiceClient
from starter_api.clients.http import build_http_client
from starter_api.schemas import AstronautsResponse

ASTROS_PATH = "/astros.json"


class AstroClient(ServiceClient):
    @classmethod
    def from_base_url(cls, base_url: str, *, transport: httpx.BaseTransport | None = None) -> AstroClient:
        return cls(build_http_client(base_url, transport=transport))

    @property
    def service_name(self) -> str:
        return "mock-api-client"

    def get_astronauts(self) -> AstronautsResponse:
        def call() -> AstronautsResponse:
            response = self._http.get(ASTROS_PATH, headers={"Accept": "application/json"})
            response.raise_for_status()
            return AstronautsResponse.model_validate(response.json())

        return self.execute_request(call)
