"""Decide which booking transitions produce a notification."""

from app.domain.entities import (
    BOOKING_STATUS_APPROVED,
    BOOKING_STATUS_PENDING,
    BookingChangeEvent,
)


def should_notify(event: BookingChangeEvent) -> bool:
    """Return ``True`` only for a booking moving from pending to approved.

    Statuses are compared as opaque values, so unknown or missing statuses
    simply do not match.
    """

    return (
        event.previous_status == BOOKING_STATUS_PENDING
        and event.new_status == BOOKING_STATUS_APPROVED
    )
