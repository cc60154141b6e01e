"""Repository implementations for infrastructure layer."""

from .booking_repository import BookingRepository
from .user_repository import UserRepository

__all__ = [
    "BookingRepository",
    "UserRepository",
]
