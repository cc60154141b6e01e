"""Notification delivery helpers for the infrastructure layer."""

from .notifiers import (
    DELIVERED_MESSAGE,
    RECORDED_MESSAGE,
    LoggingNotifier,
    Notifier,
    SendGridNotifier,
    build_notifier,
)

__all__ = [
    "DELIVERED_MESSAGE",
    "RECORDED_MESSAGE",
    "LoggingNotifier",
    "Notifier",
    "SendGridNotifier",
    "build_notifier",
]
