"""Use cases for booking notifications."""

from .booking_confirmation import EmailBranding, render_booking_confirmation
from .event_filter import should_notify
from .send_booking_confirmation import SKIPPED_MESSAGE, send_booking_confirmation

__all__ = [
    "EmailBranding",
    "SKIPPED_MESSAGE",
    "render_booking_confirmation",
    "send_booking_confirmation",
    "should_notify",
]
