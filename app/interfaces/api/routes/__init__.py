from fastapi import FastAPI

from .bookings import router as bookings_router
from .health import router as health_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(health_router)
    app.include_router(bookings_router)
