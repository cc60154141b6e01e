"""Domain entities representing rendered notifications and their delivery."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NotificationSection:
    """Titled group of ``(label, value)`` rows shown in a notification."""

    title: str
    rows: tuple[tuple[str, str], ...]

    def value_for(self, label: str) -> str | None:
        """Return the value rendered next to ``label`` if the row exists."""

        for row_label, value in self.rows:
            if row_label == label:
                return value
        return None


@dataclass(frozen=True)
class NotificationPayload:
    """Content produced for a single accepted booking event."""

    booking_id: str
    recipient: str
    subject: str
    preview: str
    html_body: str
    text_body: str
    sections: tuple[NotificationSection, ...] = field(default_factory=tuple)

    def field_values(self) -> dict[str, str]:
        """Return every informational row keyed by its label."""

        values: dict[str, str] = {}
        for section in self.sections:
            for label, value in section.rows:
                values[label] = value
        return values


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of handing a notification to the configured notifier."""

    success: bool
    recipient: str
    booking_id: str
    message: str
    delivered: bool = False


@dataclass(frozen=True)
class BookingNotificationOutcome:
    """Result of processing one booking change event."""

    skipped: bool
    message: str
    dispatch: DispatchResult | None = None

    @property
    def success(self) -> bool:
        if self.skipped:
            return True
        return bool(self.dispatch and self.dispatch.success)


__all__ = [
    "BookingNotificationOutcome",
    "DispatchResult",
    "NotificationPayload",
    "NotificationSection",
]
