import logging
from collections.abc import Callable, Iterator
from typing import Annotated, Any

import httpx
import pytest
from fastapi import APIRouter, FastAPI, Query
from fastapi.testclient import TestClient
from pydantic import BaseModel

from starter_api.clients import AstroClient
from starter_api.core import (
    Settings,
    bad_request,
    conflict,
    database_error,
    internal_error,
    not_found,
    remote_service_error,
    validation_error,
)
from starter_api.main import create_app

ASTRO_BASE_URL = "http://astro.test"

ASTROS_PAYLOAD: dict[str, Any] = {
    "message": "success",
    "number": 2,
    "people": [
        {"name": "Jasmin Moghbeli", "craft": "ISS"},
        {"name": "Jing Haiping", "craft": "Tiangong"},
    ],
}

Handler = Callable[[httpx.Request], httpx.Response]


class UserIn(BaseModel):
    email: str
    age: int


def build_raising_router() -> APIRouter:
    """Routes that fail in every way the presenter knows about."""
    router = APIRouter(prefix="/fail")

    @router.get("/not-found")
    async def fail_not_found() -> None:
        not_found("User", "42")

    @router.get("/validation")
    async def fail_validation() -> None:
        validation_error("Invalid input", {"email": "must not be blank"})

    @router.get("/validation-plain")
    async def fail_validation_plain() -> None:
        validation_error("Invalid input")

    @router.get("/bad-request")
    async def fail_bad_request() -> None:
        bad_request("Missing header")

    @router.get("/conflict")
    async def fail_conflict() -> None:
        conflict("User already exists")

    @router.get("/remote")
    def fail_remote() -> None:
        remote_service_error("mock-api-client", "timeout")

    @router.get("/internal")
    async def fail_internal() -> None:
        try:
            {}["secret-key"]
        except KeyError as e:
            internal_error("lookup of secret-key failed", e)

    @router.get("/database")
    async def fail_database() -> None:
        database_error("save", "unique constraint violated on users.email")

    @router.get("/unexpected")
    async def fail_unexpected() -> None:
        raise RuntimeError("password=hunter2")

    @router.get("/listed")
    async def listed(ids: Annotated[list[int], Query()]) -> dict[str, Any]:
        return {"ids": ids}

    @router.get("/typed")
    async def typed(limit: int, ratio: float = 1.0) -> dict[str, Any]:
        return {"limit": limit, "ratio": ratio}

    @router.post("/users")
    async def create_user(user: UserIn) -> UserIn:
        return user

    return router


@pytest.fixture
def astros_payload() -> dict[str, Any]:
    return ASTROS_PAYLOAD


@pytest.fixture
def astro_handler(astros_payload: dict[str, Any]) -> Handler:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=astros_payload)

    return handler


@pytest.fixture
def make_app(astro_handler: Handler) -> Callable[..., FastAPI]:
    """Build an app whose outbound client talks to a MockTransport."""

    def factory(handler: Handler | None = None, **overrides: Any) -> FastAPI:
        settings = Settings(_env_file=None, **overrides)
        client = AstroClient.from_base_url(
            ASTRO_BASE_URL, transport=httpx.MockTransport(handler or astro_handler)
        )
        app = create_app(settings, astro_client=client)
        app.include_router(build_raising_router())
        return app

    return factory


@pytest.fixture
def app(make_app: Callable[..., FastAPI]) -> FastAPI:
    return make_app()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Client without lifespan, so root logging stays untouched for caplog."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
