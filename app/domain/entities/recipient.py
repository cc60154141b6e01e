"""Domain entity representing the person who receives a notification."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RecipientContact:
    """Email address resolved for a user through the identity service."""

    user_id: str
    email: str


__all__ = ["RecipientContact"]
