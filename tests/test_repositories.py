"""Tests for the storage and identity lookups, using ``httpx.MockTransport``."""

from __future__ import annotations

import httpx
import pytest

from app.config import Settings
from app.domain.exceptions import (
    BookingNotFoundError,
    IdentityServiceError,
    RecipientNotFoundError,
    StorageServiceError,
)
from app.infrastructure.repositories import BookingRepository, UserRepository
from app.infrastructure.repositories.booking_repository import ENRICHED_BOOKING_SELECT
from app.infrastructure.supabase import build_service_headers, create_supabase_client

SERVICE_KEY = "service-role-secret"


def _settings() -> Settings:
    return Settings(
        supabase_url="https://project.supabase.test/",
        supabase_service_role_key=SERVICE_KEY,
    )


def _client(handler) -> httpx.Client:
    return create_supabase_client(_settings(), transport=httpx.MockTransport(handler))


def _booking_row(parking_slots=None):
    return {
        "id": "B1",
        "user_id": "U1",
        "status": "approved",
        "slot_id": "S1",
        "parking_slots": parking_slots,
    }


def test_service_headers_carry_the_key_twice():
    headers = build_service_headers("abc")

    assert headers["apikey"] == "abc"
    assert headers["Authorization"] == "Bearer abc"


def test_get_enriched_builds_join_query_and_maps_relations():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        row = _booking_row(
            {
                "slot_label": "A12",
                "parking_layouts": {"name": "Central Mall", "location": "MG Road"},
            }
        )
        return httpx.Response(200, json=[row])

    with _client(handler) as client:
        booking = BookingRepository(client).get_enriched("B1")

    assert len(seen) == 1
    request = seen[0]
    assert request.url.path == "/rest/v1/bookings"
    assert request.url.params["id"] == "eq.B1"
    assert request.url.params["select"] == ENRICHED_BOOKING_SELECT
    assert request.headers["apikey"] == SERVICE_KEY
    assert request.headers["authorization"] == f"Bearer {SERVICE_KEY}"

    assert booking.id == "B1"
    assert booking.slot_label == "A12"
    assert booking.layout_name == "Central Mall"
    assert booking.layout_location == "MG Road"
    assert booking.slot is not None and booking.slot.id == "S1"


@pytest.mark.parametrize(
    "parking_slots",
    [None, {"slot_label": "A12", "parking_layouts": None}, []],
)
def test_get_enriched_tolerates_broken_relations(parking_slots):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[_booking_row(parking_slots)])

    with _client(handler) as client:
        booking = BookingRepository(client).get_enriched("B1")

    assert booking.id == "B1"
    assert booking.layout_name is None
    assert booking.layout_location is None
    if parking_slots:
        assert booking.slot_label == "A12"
    else:
        assert booking.slot is None


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, json=[]),
        httpx.Response(200, json={}),
        httpx.Response(200, content=b"null"),
    ],
)
def test_get_enriched_raises_not_found_for_empty_results(response):
    def handler(request: httpx.Request) -> httpx.Response:
        return response

    with _client(handler) as client:
        with pytest.raises(BookingNotFoundError, match="Booking not found"):
            BookingRepository(client).get_enriched("B1")


def test_get_enriched_treats_empty_body_as_storage_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"")

    with _client(handler) as client:
        with pytest.raises(StorageServiceError):
            BookingRepository(client).get_enriched("B1")


def test_get_enriched_reports_storage_errors_separately():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"message": "column does not exist"})

    with _client(handler) as client:
        with pytest.raises(StorageServiceError, match="status 400"):
            BookingRepository(client).get_enriched("B1")


def test_get_enriched_wraps_network_failures():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with _client(handler) as client:
        with pytest.raises(StorageServiceError):
            BookingRepository(client).get_enriched("B1")


def test_get_contact_uses_admin_endpoint():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": "U1", "email": " user@example.com "})

    with _client(handler) as client:
        contact = UserRepository(client).get_contact("U1")

    assert contact.email == "user@example.com"
    assert contact.user_id == "U1"
    assert seen[0].url.path == "/auth/v1/admin/users/U1"
    assert seen[0].headers["apikey"] == SERVICE_KEY
    assert seen[0].headers["authorization"] == f"Bearer {SERVICE_KEY}"


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, json={"id": "U1"}),
        httpx.Response(200, json={"id": "U1", "email": "   "}),
        httpx.Response(200, json={"id": "U1", "email": None}),
        httpx.Response(404, json={"msg": "User not found"}),
    ],
)
def test_get_contact_raises_when_email_missing(response):
    def handler(request: httpx.Request) -> httpx.Response:
        return response

    with _client(handler) as client:
        with pytest.raises(RecipientNotFoundError, match="User email not found"):
            UserRepository(client).get_contact("U1")


def test_get_contact_reports_identity_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"msg": "invalid JWT"})

    with _client(handler) as client:
        with pytest.raises(IdentityServiceError, match="status 401"):
            UserRepository(client).get_contact("U1")


def test_get_contact_keeps_user_id_inside_admin_endpoint():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(404, json={"msg": "User not found"})

    with _client(handler) as client:
        with pytest.raises(RecipientNotFoundError):
            UserRepository(client).get_contact("../../../rest/v1/secrets?select=email")

    assert len(seen) == 1
    assert seen[0].url.raw_path.startswith(b"/auth/v1/admin/users/")
    assert b"%2F" in seen[0].url.raw_path
    assert seen[0].url.query == b""


@pytest.mark.parametrize("user_id", [".", ".."])
def test_get_contact_rejects_dot_segments(user_id):
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with _client(handler) as client:
        with pytest.raises(RecipientNotFoundError):
            UserRepository(client).get_contact(user_id)
