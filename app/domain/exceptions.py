"""Errors raised while turning a booking event into a notification."""


class BookingNotificationError(Exception):
    """Base class for failures of the booking notification pipeline."""


class NotFoundError(BookingNotificationError):
    """A record required to build the notification does not exist."""


class BookingNotFoundError(NotFoundError):
    """The storage service returned no booking for the requested id."""

    def __init__(self, message: str = "Booking not found") -> None:
        super().__init__(message)


class RecipientNotFoundError(NotFoundError):
    """The identity service has no email address for the booking owner."""

    def __init__(self, message: str = "User email not found") -> None:
        super().__init__(message)


class UpstreamServiceError(BookingNotificationError):
    """A dependent service could not be queried successfully."""


class StorageServiceError(UpstreamServiceError):
    """The booking lookup failed for reasons other than a missing booking."""


class IdentityServiceError(UpstreamServiceError):
    """The user lookup failed for reasons other than a missing user."""


class TransportError(BookingNotificationError):
    """The email transport rejected or failed to accept a message."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InvalidBookingEventError(BookingNotificationError, ValueError):
    """The incoming event cannot be processed."""


__all__ = [
    "BookingNotFoundError",
    "BookingNotificationError",
    "IdentityServiceError",
    "InvalidBookingEventError",
    "NotFoundError",
    "RecipientNotFoundError",
    "StorageServiceError",
    "TransportError",
    "UpstreamServiceError",
]
