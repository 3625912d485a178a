"""Demonstration endpoints."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from starter_api.clients import AstroClient
from starter_api.schemas import AstronautsResponse, HelloResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["hello"])


def get_astro_client(request: Request) -> AstroClient:
    """Client created once by the application factory."""
    return request.app.state.astro_client


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/hello", response_model=HelloResponse)
async def say_hello(name: str = "World") -> HelloResponse:
    """Return a greeting for ``name``."""
    logger.info("Processing hello request for name: %s", name)
    response = HelloResponse(message=f"Hello, {name}!", timestamp=utc_timestamp(), name=name)
    logger.debug("Generated hello response: %s", response)
    return response


# Plain def: the client blocks, so FastAPI runs this in its threadpool.
@router.get("/astro", response_model=AstronautsResponse)
def get_astros(client: Annotated[AstroClient, Depends(get_astro_client)]) -> AstronautsResponse:
    """Proxy the remote list of people currently in space."""
    return client.get_astronauts()
