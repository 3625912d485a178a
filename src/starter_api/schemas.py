"""Response DTOs."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HelloResponse(BaseModel):
    message: str = Field(min_length=1)
    timestamp: str = Field(min_length=1)
    name: str


class Astronaut(BaseModel):
    name: str
    craft: str


class AstronautsResponse(BaseModel):
    """Payload of the open-notify ``astros.json`` feed."""

    people: list[Astronaut] = []
    number: int = 0
    message: str | None = None
