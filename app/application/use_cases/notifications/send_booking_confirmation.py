"""Use case turning an approved booking into a confirmation notification."""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo

from app.domain.entities import BookingChangeEvent, BookingNotificationOutcome
from app.domain.exceptions import InvalidBookingEventError
from app.infrastructure.notifications import Notifier
from app.infrastructure.repositories import BookingRepository, UserRepository

from .booking_confirmation import EmailBranding, render_booking_confirmation
from .event_filter import should_notify

logger = logging.getLogger(__name__)

SKIPPED_MESSAGE = "No email needed"


def send_booking_confirmation(
    event: BookingChangeEvent,
    *,
    bookings: BookingRepository,
    users: UserRepository,
    notifier: Notifier,
    now: datetime | None = None,
    tz: tzinfo | None = None,
    branding: EmailBranding | None = None,
) -> BookingNotificationOutcome:
    """Notify the booking owner when ``event`` approves a pending booking.

    Lookup failures propagate as :class:`~app.domain.exceptions.NotFoundError`
    or :class:`~app.domain.exceptions.UpstreamServiceError`; nothing is
    rendered or dispatched in that case.
    """

    if not should_notify(event):
        logger.debug(
            "Ignoring booking %s transition %r -> %r",
            event.booking_id,
            event.previous_status,
            event.new_status,
        )
        return BookingNotificationOutcome(skipped=True, message=SKIPPED_MESSAGE)

    booking_id = (event.booking_id or "").strip()
    user_id = (event.user_id or "").strip()
    if not booking_id:
        raise InvalidBookingEventError("Booking id is missing from the event")
    if not user_id:
        raise InvalidBookingEventError("User id is missing from the event")

    booking = bookings.get_enriched(booking_id)
    if booking.user_id and booking.user_id != user_id:
        logger.warning(
            "Booking %s is owned by %s but the event names %s",
            booking_id,
            booking.user_id,
            user_id,
        )
    contact = users.get_contact(user_id)

    payload = render_booking_confirmation(
        event, booking, contact, now=now, tz=tz, branding=branding
    )
    logger.info(
        "Dispatching confirmation for booking %s (status=%s, parking=%s, spot=%s)",
        payload.booking_id,
        booking.status,
        booking.layout_name,
        booking.slot_label,
    )
    result = notifier.dispatch(payload)
    return BookingNotificationOutcome(
        skipped=False,
        message=result.message,
        dispatch=result,
    )


__all__ = ["SKIPPED_MESSAGE", "send_booking_confirmation"]
