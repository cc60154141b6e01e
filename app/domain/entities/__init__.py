"""Domain entities exposed by the application."""

from .booking import (
    BOOKING_STATUS_APPROVED,
    BOOKING_STATUS_CANCELLED,
    BOOKING_STATUS_EXPIRED,
    BOOKING_STATUS_PENDING,
    BOOKING_STATUS_REJECTED,
    BookingChangeEvent,
    BookingSnapshot,
    EnrichedBooking,
    ParkingLayout,
    ParkingSlot,
)
from .notification import (
    BookingNotificationOutcome,
    DispatchResult,
    NotificationPayload,
    NotificationSection,
)
from .recipient import RecipientContact

__all__ = [
    "BOOKING_STATUS_APPROVED",
    "BOOKING_STATUS_CANCELLED",
    "BOOKING_STATUS_EXPIRED",
    "BOOKING_STATUS_PENDING",
    "BOOKING_STATUS_REJECTED",
    "BookingChangeEvent",
    "BookingNotificationOutcome",
    "BookingSnapshot",
    "DispatchResult",
    "EnrichedBooking",
    "NotificationPayload",
    "NotificationSection",
    "ParkingLayout",
    "ParkingSlot",
    "RecipientContact",
]
