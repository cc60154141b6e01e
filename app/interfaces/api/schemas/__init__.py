from .booking import (
    BookingNotificationErrorResponse,
    BookingNotificationResponse,
    BookingRecord,
    BookingWebhookPayload,
    PreviousBookingRecord,
)
from .health import HealthRead

__all__ = [
    "BookingNotificationErrorResponse",
    "BookingNotificationResponse",
    "BookingRecord",
    "BookingWebhookPayload",
    "HealthRead",
    "PreviousBookingRecord",
]
