"""Pydantic model describing the health probe response."""

from pydantic import BaseModel


class HealthRead(BaseModel):
    """Liveness information including the active notification transport."""

    status: str
    transport: str


__all__ = ["HealthRead"]
