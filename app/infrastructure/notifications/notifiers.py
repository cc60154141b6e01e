"""Notifier strategies used to dispatch rendered booking notifications."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from app.config import Settings
from app.domain.entities import DispatchResult, NotificationPayload
from app.domain.exceptions import TransportError
from app.infrastructure import email as email_module

logger = logging.getLogger(__name__)

RECORDED_MESSAGE = "notification recorded, not delivered"
DELIVERED_MESSAGE = "Booking confirmation email sent"


class Notifier(ABC):
    """Deliver or record a :class:`NotificationPayload`."""

    name: str

    @abstractmethod
    def dispatch(self, payload: NotificationPayload) -> DispatchResult:
        """Hand ``payload`` to the underlying channel exactly once."""


class LoggingNotifier(Notifier):
    """Record notifications in the application log instead of sending them."""

    name = "log"

    def dispatch(self, payload: NotificationPayload) -> DispatchResult:
        logger.info(
            "Recorded booking notification for booking %s to %s: subject=%r preview=%r body_length=%s",
            payload.booking_id,
            payload.recipient,
            payload.subject,
            payload.preview,
            len(payload.html_body),
        )
        return DispatchResult(
            success=True,
            recipient=payload.recipient,
            booking_id=payload.booking_id,
            message=RECORDED_MESSAGE,
            delivered=False,
        )


class SendGridNotifier(Notifier):
    """Send notifications as email through the SendGrid API."""

    name = "sendgrid"

    def __init__(self, api_key: str, sender: str, sender_name: str | None = None) -> None:
        self._api_key = api_key
        self.sender = sender
        self.sender_name = sender_name

    def dispatch(self, payload: NotificationPayload) -> DispatchResult:
        message = email_module.build_message(
            sender=self.sender,
            sender_name=self.sender_name,
            recipient=payload.recipient,
            subject=payload.subject,
            html_content=payload.html_body,
            plain_text_content=payload.text_body,
        )
        try:
            status_code = email_module.send_email(self._api_key, message)
        except TransportError as exc:
            logger.warning(
                "Booking notification for booking %s was not delivered", payload.booking_id
            )
            return DispatchResult(
                success=False,
                recipient=payload.recipient,
                booking_id=payload.booking_id,
                message=str(exc),
                delivered=False,
            )

        logger.info(
            "Booking notification for booking %s accepted by SendGrid with status %s",
            payload.booking_id,
            status_code,
        )
        return DispatchResult(
            success=True,
            recipient=payload.recipient,
            booking_id=payload.booking_id,
            message=DELIVERED_MESSAGE,
            delivered=True,
        )


def build_notifier(settings: Settings) -> Notifier:
    """Return the notifier matching the configured transport."""

    if settings.transport_enabled:
        return SendGridNotifier(
            api_key=settings.sendgrid_api_key.strip(),
            sender=settings.sendgrid_sender,
            sender_name=settings.sendgrid_sender_name,
        )
    logger.info("SendGrid is not configured; booking notifications will only be logged")
    return LoggingNotifier()


__all__ = [
    "DELIVERED_MESSAGE",
    "LoggingNotifier",
    "Notifier",
    "RECORDED_MESSAGE",
    "SendGridNotifier",
    "build_notifier",
]
