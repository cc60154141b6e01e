"""Domain entities describing parking bookings and their related records."""

from __future__ import annotations

from dataclasses import dataclass

BOOKING_STATUS_PENDING = "pending"
BOOKING_STATUS_APPROVED = "approved"
BOOKING_STATUS_REJECTED = "rejected"
BOOKING_STATUS_EXPIRED = "expired"
BOOKING_STATUS_CANCELLED = "cancelled"


@dataclass(frozen=True)
class BookingSnapshot:
    """Booking fields captured by the storage service when the event fired."""

    id: str | None
    user_id: str | None
    user_name: str | None = None
    vehicle_number: str | None = None
    vehicle_type: str | None = None
    duration: int | float | None = None
    booking_start_time: str | None = None
    booking_end_time: str | None = None
    slot_id: str | None = None


@dataclass(frozen=True)
class BookingChangeEvent:
    """Status transition of a booking as delivered by the database webhook."""

    previous_status: str | None
    new_status: str | None
    booking: BookingSnapshot

    @property
    def booking_id(self) -> str | None:
        return self.booking.id

    @property
    def user_id(self) -> str | None:
        return self.booking.user_id


@dataclass(frozen=True)
class ParkingLayout:
    """Parking facility a slot belongs to."""

    id: str | None
    name: str | None
    location: str | None


@dataclass(frozen=True)
class ParkingSlot:
    """Individual parking spot, optionally linked to its layout."""

    id: str | None
    label: str | None
    layout: ParkingLayout | None = None


@dataclass(frozen=True)
class EnrichedBooking:
    """Booking joined with its slot and the slot's parking layout.

    Either relation may be missing when the linked row was deleted or never
    assigned; the convenience properties return ``None`` in that case.
    """

    id: str
    user_id: str | None
    status: str | None
    slot: ParkingSlot | None = None

    @property
    def slot_label(self) -> str | None:
        return self.slot.label if self.slot else None

    @property
    def layout(self) -> ParkingLayout | None:
        return self.slot.layout if self.slot else None

    @property
    def layout_name(self) -> str | None:
        layout = self.layout
        return layout.name if layout else None

    @property
    def layout_location(self) -> str | None:
        layout = self.layout
        return layout.location if layout else None


__all__ = [
    "BOOKING_STATUS_APPROVED",
    "BOOKING_STATUS_CANCELLED",
    "BOOKING_STATUS_EXPIRED",
    "BOOKING_STATUS_PENDING",
    "BOOKING_STATUS_REJECTED",
    "BookingChangeEvent",
    "BookingSnapshot",
    "EnrichedBooking",
    "ParkingLayout",
    "ParkingSlot",
]
