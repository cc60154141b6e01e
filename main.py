import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.infrastructure.logging_config import setup_logging
from app.interfaces.api.dependencies import get_notifier
from app.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and select the notification transport on startup."""

    setup_logging()
    notifier = get_notifier()
    logger.info("Booking notifier started with %s transport", notifier.name)
    yield


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error while serving %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": str(exc) or "Unknown error"},
    )


def create_app() -> FastAPI:
    """Create and configure the booking notification service."""

    app = FastAPI(title="ParkHub Booking Notifier", lifespan=lifespan)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000)
