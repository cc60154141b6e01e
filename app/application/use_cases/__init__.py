"""Aggregate application use cases."""

from .notifications import send_booking_confirmation, should_notify

__all__ = [
    "send_booking_confirmation",
    "should_notify",
]
