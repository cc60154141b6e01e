"""Shared fixtures and fakes for the booking notifier tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from app.domain.entities import (
    BookingChangeEvent,
    BookingSnapshot,
    DispatchResult,
    EnrichedBooking,
    NotificationPayload,
    ParkingLayout,
    ParkingSlot,
    RecipientContact,
)
from app.domain.exceptions import BookingNotFoundError, RecipientNotFoundError

FIXED_NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def make_event(
    *,
    previous_status: str | None = "pending",
    new_status: str | None = "approved",
    **snapshot_overrides,
) -> BookingChangeEvent:
    snapshot = {
        "id": "B1",
        "user_id": "U1",
        "user_name": "Asha Rao",
        "vehicle_number": "KA01AB1234",
        "vehicle_type": "car",
        "duration": 2,
        "booking_start_time": "2024-01-01T09:00:00Z",
        "booking_end_time": "2024-01-01T11:00:00Z",
        "slot_id": "S1",
    }
    snapshot.update(snapshot_overrides)
    return BookingChangeEvent(
        previous_status=previous_status,
        new_status=new_status,
        booking=BookingSnapshot(**snapshot),
    )


def make_booking(
    *,
    slot_label: str | None = "A12",
    layout_name: str | None = "Central Mall",
    layout_location: str | None = "MG Road",
    with_slot: bool = True,
    with_layout: bool = True,
) -> EnrichedBooking:
    layout = (
        ParkingLayout(id="L1", name=layout_name, location=layout_location)
        if with_layout
        else None
    )
    slot = ParkingSlot(id="S1", label=slot_label, layout=layout) if with_slot else None
    return EnrichedBooking(id="B1", user_id="U1", status="approved", slot=slot)


class FakeBookingRepository:
    """In-memory stand-in for :class:`BookingRepository`."""

    def __init__(self, booking: EnrichedBooking | None = None) -> None:
        self.booking = booking
        self.calls: list[str] = []

    def get_enriched(self, booking_id: str) -> EnrichedBooking:
        self.calls.append(booking_id)
        if self.booking is None:
            raise BookingNotFoundError()
        return self.booking


class FakeUserRepository:
    """In-memory stand-in for :class:`UserRepository`."""

    def __init__(self, email: str | None = "user@example.com") -> None:
        self.email = email
        self.calls: list[str] = []

    def get_contact(self, user_id: str) -> RecipientContact:
        self.calls.append(user_id)
        if not self.email:
            raise RecipientNotFoundError()
        return RecipientContact(user_id=user_id, email=self.email)


class RecordingNotifier:
    """Notifier that keeps every payload it receives."""

    name = "recording"

    def __init__(self, *, success: bool = True, message: str = "sent") -> None:
        self.success = success
        self.message = message
        self.payloads: list[NotificationPayload] = []

    def dispatch(self, payload: NotificationPayload) -> DispatchResult:
        self.payloads.append(payload)
        return DispatchResult(
            success=self.success,
            recipient=payload.recipient,
            booking_id=payload.booking_id,
            message=self.message,
            delivered=self.success,
        )


@pytest.fixture()
def settings_env(monkeypatch: pytest.MonkeyPatch):
    """Configure the minimal environment and reset cached settings."""

    from app.config import reset_settings_cache
    from app.interfaces.api.dependencies import reset_dependency_caches

    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.test")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "service-role-secret")
    monkeypatch.delenv("SENDGRID_API_KEY", raising=False)
    monkeypatch.delenv("SENDGRID_SENDER", raising=False)
    monkeypatch.delenv("APP_TIMEZONE", raising=False)
    reset_settings_cache()
    reset_dependency_caches()
    yield monkeypatch
    reset_settings_cache()
    reset_dependency_caches()
