"""Pydantic models describing the booking webhook and its responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain.entities import BookingChangeEvent, BookingSnapshot


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


class BookingRecord(BaseModel):
    """Booking row as sent by the database webhook after the update."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    user_id: str | None = None
    user_name: str | None = None
    vehicle_number: str | None = None
    vehicle_type: str | None = None
    duration: Any = None
    status: str | None = None
    booking_start_time: str | None = None
    booking_end_time: str | None = None
    slot_id: str | None = None

    @field_validator(
        "id",
        "user_id",
        "user_name",
        "vehicle_number",
        "vehicle_type",
        "status",
        "booking_start_time",
        "booking_end_time",
        "slot_id",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return _as_text(value)

    @field_validator("duration", mode="before")
    @classmethod
    def _coerce_duration(cls, value: Any) -> int | float | None:
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return value
        try:
            numeric = float(str(value).strip())
        except ValueError:
            return None
        return int(numeric) if numeric.is_integer() else numeric


class PreviousBookingRecord(BaseModel):
    """Subset of the booking row before the update."""

    model_config = ConfigDict(extra="ignore")

    status: str | None = None

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: Any) -> str | None:
        return _as_text(value)


class BookingWebhookPayload(BaseModel):
    """Body of the database webhook fired on booking updates."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: str | None = None
    table: str | None = None
    schema_name: str | None = Field(default=None, alias="schema")
    record: BookingRecord | None = None
    old_record: PreviousBookingRecord | None = None

    def to_change_event(self) -> BookingChangeEvent:
        """Convert the webhook body into a :class:`BookingChangeEvent`."""

        record = self.record or BookingRecord()
        return BookingChangeEvent(
            previous_status=self.old_record.status if self.old_record else None,
            new_status=record.status,
            booking=BookingSnapshot(
                id=record.id,
                user_id=record.user_id,
                user_name=record.user_name,
                vehicle_number=record.vehicle_number,
                vehicle_type=record.vehicle_type,
                duration=record.duration,
                booking_start_time=record.booking_start_time,
                booking_end_time=record.booking_end_time,
                slot_id=record.slot_id,
            ),
        )


class BookingNotificationResponse(BaseModel):
    """Response returned when the event was processed or ignored."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    recipient: str | None = None
    entity_id: str | None = Field(default=None, alias="entityId")
    booking_id: str | None = Field(default=None, alias="bookingId")
    delivered: bool | None = None


class BookingNotificationErrorResponse(BaseModel):
    """Response returned when the event could not be processed."""

    success: bool = False
    error: str
    recipient: str | None = None
    entity_id: str | None = Field(default=None, alias="entityId")

    model_config = ConfigDict(populate_by_name=True)


__all__ = [
    "BookingNotificationErrorResponse",
    "BookingNotificationResponse",
    "BookingRecord",
    "BookingWebhookPayload",
    "PreviousBookingRecord",
]
