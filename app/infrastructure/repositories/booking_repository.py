"""Read access to bookings and their parking slot and layout."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from app.domain.entities import EnrichedBooking, ParkingLayout, ParkingSlot
from app.domain.exceptions import BookingNotFoundError, StorageServiceError

logger = logging.getLogger(__name__)

BOOKINGS_PATH = "/rest/v1/bookings"
ENRICHED_BOOKING_SELECT = "*,parking_slots(slot_label,parking_layouts(name,location))"


def _first_mapping(value: Any) -> Mapping[str, Any] | None:
    """Return ``value`` when it is an embedded row, or the first row of a list."""

    if isinstance(value, Mapping):
        return value
    if isinstance(value, list) and value and isinstance(value[0], Mapping):
        return value[0]
    return None


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class BookingRepository:
    """Fetch bookings joined with their slot and parking layout."""

    def __init__(self, client: httpx.Client) -> None:
        self.client = client

    def get_enriched(self, booking_id: str) -> EnrichedBooking:
        """Return the booking identified by ``booking_id`` with its relations.

        Raises :class:`BookingNotFoundError` when the storage service returns
        no rows and :class:`StorageServiceError` when the query itself fails.
        """

        try:
            response = self.client.get(
                BOOKINGS_PATH,
                params={"id": f"eq.{booking_id}", "select": ENRICHED_BOOKING_SELECT},
            )
        except httpx.HTTPError as exc:
            raise StorageServiceError(f"Booking lookup failed: {exc}") from exc

        if response.status_code >= 400:
            logger.error(
                "Booking lookup for %s failed with status %s",
                booking_id,
                response.status_code,
            )
            raise StorageServiceError(
                f"Booking lookup failed with status {response.status_code}"
            )

        try:
            rows = response.json()
        except ValueError as exc:
            raise StorageServiceError("Booking lookup returned invalid JSON") from exc

        if not isinstance(rows, list) or not rows:
            raise BookingNotFoundError()

        row = rows[0]
        if not isinstance(row, Mapping):
            raise BookingNotFoundError()
        return self._to_entity(row, booking_id)

    @staticmethod
    def _to_entity(row: Mapping[str, Any], booking_id: str) -> EnrichedBooking:
        slot_row = _first_mapping(row.get("parking_slots"))
        slot: ParkingSlot | None = None
        if slot_row is not None:
            layout_row = _first_mapping(slot_row.get("parking_layouts"))
            layout = None
            if layout_row is not None:
                layout = ParkingLayout(
                    id=_optional_str(layout_row.get("id")),
                    name=_optional_str(layout_row.get("name")),
                    location=_optional_str(layout_row.get("location")),
                )
            slot = ParkingSlot(
                id=_optional_str(slot_row.get("id")) or _optional_str(row.get("slot_id")),
                label=_optional_str(slot_row.get("slot_label")),
                layout=layout,
            )

        return EnrichedBooking(
            id=_optional_str(row.get("id")) or booking_id,
            user_id=_optional_str(row.get("user_id")),
            status=_optional_str(row.get("status")),
            slot=slot,
        )


__all__ = ["BookingRepository", "BOOKINGS_PATH", "ENRICHED_BOOKING_SELECT"]
