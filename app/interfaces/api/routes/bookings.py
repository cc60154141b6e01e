"""Webhook receiving booking status changes from the database."""

from __future__ import annotations

import logging
from datetime import tzinfo

from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.application.use_cases.notifications import (
    EmailBranding,
    send_booking_confirmation,
)
from app.domain.exceptions import BookingNotificationError, NotFoundError
from app.infrastructure.notifications import Notifier
from app.infrastructure.repositories import BookingRepository, UserRepository
from app.interfaces.api.dependencies import (
    get_booking_repository,
    get_display_timezone,
    get_email_branding,
    get_notifier,
    get_user_repository,
)
from app.interfaces.api.schemas import (
    BookingNotificationErrorResponse,
    BookingNotificationResponse,
    BookingWebhookPayload,
)

router = APIRouter(tags=["bookings"])
logger = logging.getLogger(__name__)


def failure_response(error: str, **extra: str | None) -> JSONResponse:
    """Build the structured 500 response returned for every failure."""

    body = BookingNotificationErrorResponse(error=error or "Unknown error", **extra)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


def _success_response(body: BookingNotificationResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


@router.post(
    "/webhooks/booking-approved",
    responses={500: {"model": BookingNotificationErrorResponse}},
    response_model=BookingNotificationResponse,
)
@router.post("/", include_in_schema=False)
async def booking_approved_webhook(
    request: Request,
    bookings: BookingRepository = Depends(get_booking_repository),
    users: UserRepository = Depends(get_user_repository),
    notifier: Notifier = Depends(get_notifier),
    branding: EmailBranding = Depends(get_email_branding),
    tz: tzinfo = Depends(get_display_timezone),
) -> JSONResponse:
    """Send the confirmation email when a booking moves from pending to approved."""

    try:
        raw_payload = await request.json()
    except ValueError:
        logger.warning("Rejected booking webhook with an invalid JSON body")
        return failure_response("Invalid JSON payload")

    try:
        payload = BookingWebhookPayload.model_validate(raw_payload)
    except ValidationError as exc:
        logger.warning("Rejected malformed booking webhook: %s", exc.errors())
        return failure_response("Invalid booking event payload")

    event = payload.to_change_event()
    try:
        outcome = await run_in_threadpool(
            send_booking_confirmation,
            event,
            bookings=bookings,
            users=users,
            notifier=notifier,
            tz=tz,
            branding=branding,
        )
    except NotFoundError as exc:
        logger.warning("Booking %s could not be notified: %s", event.booking_id, exc)
        return failure_response(str(exc), entity_id=event.booking_id)
    except BookingNotificationError as exc:
        logger.error("Error sending booking email for %s: %s", event.booking_id, exc)
        return failure_response(str(exc), entity_id=event.booking_id)
    except Exception as exc:
        logger.exception("Unexpected error sending booking email for %s", event.booking_id)
        return failure_response(str(exc), entity_id=event.booking_id)

    if outcome.skipped:
        return _success_response(BookingNotificationResponse(message=outcome.message))

    dispatch = outcome.dispatch
    if dispatch is None or not dispatch.success:
        return failure_response(
            outcome.message,
            recipient=dispatch.recipient if dispatch else None,
            entity_id=event.booking_id,
        )

    return _success_response(
        BookingNotificationResponse(
            message=dispatch.message,
            recipient=dispatch.recipient,
            entity_id=dispatch.booking_id,
            booking_id=dispatch.booking_id,
            delivered=dispatch.delivered,
        )
    )
