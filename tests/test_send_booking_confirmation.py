"""Tests for the use case wiring filter, lookups, rendering and dispatch."""

from __future__ import annotations

import logging

import pytest

from app.application.use_cases.notifications import (
    SKIPPED_MESSAGE,
    send_booking_confirmation,
)
from app.domain.entities import EnrichedBooking
from app.domain.exceptions import (
    BookingNotFoundError,
    InvalidBookingEventError,
    RecipientNotFoundError,
)
from app.infrastructure.notifications import RECORDED_MESSAGE, LoggingNotifier

from conftest import (
    FIXED_NOW,
    FakeBookingRepository,
    FakeUserRepository,
    RecordingNotifier,
    make_booking,
    make_event,
)


def _run(event, *, bookings=None, users=None, notifier=None):
    return send_booking_confirmation(
        event,
        bookings=bookings,
        users=users,
        notifier=notifier,
        now=FIXED_NOW,
    )


@pytest.mark.parametrize(
    ("previous_status", "new_status"),
    [("approved", "approved"), ("pending", "rejected"), (None, "approved")],
)
def test_ignored_transitions_make_no_calls(previous_status, new_status):
    bookings = FakeBookingRepository(make_booking())
    users = FakeUserRepository()
    notifier = RecordingNotifier()

    outcome = _run(
        make_event(previous_status=previous_status, new_status=new_status),
        bookings=bookings,
        users=users,
        notifier=notifier,
    )

    assert outcome.skipped is True
    assert outcome.success is True
    assert outcome.message == SKIPPED_MESSAGE
    assert bookings.calls == []
    assert users.calls == []
    assert notifier.payloads == []


def test_accepted_transition_looks_up_once_and_dispatches():
    bookings = FakeBookingRepository(make_booking())
    users = FakeUserRepository("user@example.com")
    notifier = RecordingNotifier(message="Booking confirmation email sent")

    outcome = _run(make_event(), bookings=bookings, users=users, notifier=notifier)

    assert bookings.calls == ["B1"]
    assert users.calls == ["U1"]
    assert len(notifier.payloads) == 1
    payload = notifier.payloads[0]
    assert "A12" in payload.subject
    for expected in ("2 hours", "KA01AB1234", "Central Mall", "MG Road"):
        assert expected in payload.html_body
    assert outcome.skipped is False
    assert outcome.success is True
    assert outcome.dispatch.recipient == "user@example.com"
    assert outcome.dispatch.booking_id == "B1"


def test_missing_booking_stops_before_identity_lookup():
    bookings = FakeBookingRepository(None)
    users = FakeUserRepository()
    notifier = RecordingNotifier()

    with pytest.raises(BookingNotFoundError, match="Booking not found"):
        _run(make_event(), bookings=bookings, users=users, notifier=notifier)

    assert users.calls == []
    assert notifier.payloads == []


def test_missing_recipient_prevents_dispatch():
    notifier = RecordingNotifier()

    with pytest.raises(RecipientNotFoundError, match="User email not found"):
        _run(
            make_event(),
            bookings=FakeBookingRepository(make_booking()),
            users=FakeUserRepository(None),
            notifier=notifier,
        )

    assert notifier.payloads == []


def test_missing_relations_still_dispatch_successfully():
    outcome = _run(
        make_event(),
        bookings=FakeBookingRepository(make_booking(with_slot=False)),
        users=FakeUserRepository(),
        notifier=LoggingNotifier(),
    )

    assert outcome.success is True
    assert outcome.message == RECORDED_MESSAGE
    assert outcome.dispatch.delivered is False


def test_failed_delivery_is_reported():
    outcome = _run(
        make_event(),
        bookings=FakeBookingRepository(make_booking()),
        users=FakeUserRepository(),
        notifier=RecordingNotifier(success=False, message="SendGrid API request failed"),
    )

    assert outcome.skipped is False
    assert outcome.success is False
    assert outcome.message == "SendGrid API request failed"


@pytest.mark.parametrize("overrides", [{"id": None}, {"id": "  "}, {"user_id": None}])
def test_accepted_event_without_identifiers_is_invalid(overrides):
    bookings = FakeBookingRepository(make_booking())

    with pytest.raises(InvalidBookingEventError):
        _run(
            make_event(**overrides),
            bookings=bookings,
            users=FakeUserRepository(),
            notifier=RecordingNotifier(),
        )

    assert bookings.calls == []


def test_owner_mismatch_is_logged_and_event_user_is_notified(caplog):
    booking = make_booking()
    stored = EnrichedBooking(
        id=booking.id, user_id="U9", status=booking.status, slot=booking.slot
    )
    users = FakeUserRepository()

    with caplog.at_level(logging.WARNING):
        outcome = _run(
            make_event(),
            bookings=FakeBookingRepository(stored),
            users=users,
            notifier=RecordingNotifier(),
        )

    assert outcome.success is True
    assert users.calls == ["U1"]
    assert "owned by U9" in caplog.text


def test_matching_owner_logs_no_warning(caplog):
    with caplog.at_level(logging.WARNING):
        _run(
            make_event(),
            bookings=FakeBookingRepository(make_booking()),
            users=FakeUserRepository(),
            notifier=RecordingNotifier(),
        )

    assert "owned by" not in caplog.text
