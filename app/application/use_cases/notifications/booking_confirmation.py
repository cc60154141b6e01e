"""Rendering of the email sent when a parking booking is approved."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from html import escape

from app.domain.entities import (
    BookingChangeEvent,
    EnrichedBooking,
    NotificationPayload,
    NotificationSection,
    RecipientContact,
)
from app.utils import ensure_timezone, parse_iso_datetime

PLACEHOLDER = "N/A"
DEFAULT_GREETING_NAME = "Customer"

_WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_STYLES = """
      body { font-family: 'Arial', sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px; }
      .header { background: linear-gradient(135deg, #06d6a0 0%, #4a90e2 100%); color: white; padding: 30px; text-align: center; border-radius: 10px 10px 0 0; }
      .header h1 { margin: 0; font-size: 28px; }
      .content { background: #ffffff; padding: 30px; border: 1px solid #e0e0e0; border-top: none; }
      .detail-box { background: #f5f5f5; padding: 20px; border-radius: 8px; margin: 20px 0; }
      .detail-box h3 { margin-top: 0; color: #4a90e2; }
      .detail-row { display: flex; justify-content: space-between; padding: 10px 0; border-bottom: 1px solid #e0e0e0; }
      .detail-row:last-child { border-bottom: none; }
      .label { font-weight: bold; color: #555; }
      .value { color: #333; text-align: right; }
      .success-badge { background: #06d6a0; color: white; padding: 10px 20px; border-radius: 20px; display: inline-block; font-weight: bold; margin: 20px 0; }
      .important-note { background: #fff3cd; border-left: 4px solid #ffa726; padding: 15px; margin: 20px 0; }
      .footer { text-align: center; padding: 20px; color: #999; font-size: 12px; }
"""

# Rows whose value is emphasised in the HTML body.
_HIGHLIGHTED_LABELS = frozenset({"Spot Number", "Vehicle Number"})


@dataclass(frozen=True)
class EmailBranding:
    """Names printed in the email header, closing line and footer."""

    product_name: str = "Traffinity ParkHub"
    company_name: str = "Traffinity"


def _display(value: object) -> str:
    if value is None:
        return PLACEHOLDER
    text = str(value).strip()
    return text or PLACEHOLDER


def format_date(value: datetime | None) -> str:
    """Return ``value`` as ``Monday, 1 January 2024``."""

    if value is None:
        return PLACEHOLDER
    weekday = _WEEKDAYS[value.weekday()]
    month = _MONTHS[value.month - 1]
    return f"{weekday}, {value.day} {month} {value.year}"


def format_time(value: datetime | None) -> str:
    """Return ``value`` on a 12-hour clock, e.g. ``09:00 AM``."""

    if value is None:
        return PLACEHOLDER
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour:02d}:{value.minute:02d} {suffix}"


def format_duration(duration: int | float | None) -> str:
    """Return the booking length, using the singular only for exactly one hour."""

    if duration is None or isinstance(duration, bool):
        return PLACEHOLDER
    try:
        numeric = float(duration)
    except (TypeError, ValueError):
        return PLACEHOLDER

    amount = str(int(numeric)) if numeric.is_integer() else f"{numeric:.15g}"
    unit = "hour" if numeric == 1 else "hours"
    return f"{amount} {unit}"


def build_subject(booking: EnrichedBooking) -> str:
    return f"Parking Booking Confirmed - Spot {_display(booking.slot_label)}"


def build_preview(booking: EnrichedBooking) -> str:
    return f"Your parking at {_display(booking.layout_name)} has been approved!"


def build_sections(
    event: BookingChangeEvent,
    booking: EnrichedBooking,
    tz: tzinfo,
) -> tuple[NotificationSection, ...]:
    """Collect every informational field of the confirmation email."""

    snapshot = event.booking
    start = ensure_timezone(parse_iso_datetime(snapshot.booking_start_time), tz)
    end = ensure_timezone(parse_iso_datetime(snapshot.booking_end_time), tz)

    return (
        NotificationSection(
            title="Parking Details",
            rows=(
                ("Parking Name", _display(booking.layout_name)),
                ("Location", _display(booking.layout_location)),
                ("Spot Number", _display(booking.slot_label)),
            ),
        ),
        NotificationSection(
            title="Booking Information",
            rows=(
                ("Date", format_date(start)),
                ("Start Time", format_time(start)),
                ("End Time", format_time(end)),
                ("Duration", format_duration(snapshot.duration)),
            ),
        ),
        NotificationSection(
            title="Vehicle Details",
            rows=(
                ("Vehicle Number", _display(snapshot.vehicle_number)),
                ("Vehicle Type", _display(snapshot.vehicle_type)),
            ),
        ),
    )


def _render_section_html(section: NotificationSection) -> str:
    rows: list[str] = []
    for label, value in section.rows:
        rendered_value = escape(value)
        if label in _HIGHLIGHTED_LABELS:
            rendered_value = f"<strong>{rendered_value}</strong>"
        rows.append(
            '<div class="detail-row">'
            f'<span class="label">{escape(label)}:</span>'
            f'<span class="value">{rendered_value}</span>'
            "</div>"
        )
    return (
        '<div class="detail-box">'
        f"<h3>{escape(section.title)}</h3>"
        f"{''.join(rows)}"
        "</div>"
    )


def _render_html(
    *,
    greeting_name: str,
    slot_label: str,
    sections: tuple[NotificationSection, ...],
    branding: EmailBranding,
    year: int,
) -> str:
    product = escape(branding.product_name)
    company = escape(branding.company_name)
    return "\n".join(
        (
            "<!DOCTYPE html>",
            "<html>",
            "  <head>",
            '    <meta charset="utf-8">',
            '    <meta name="viewport" content="width=device-width, initial-scale=1.0">',
            "    <title>Parking Booking Confirmed</title>",
            f"    <style>{_STYLES}    </style>",
            "  </head>",
            "  <body>",
            '    <div class="header"><h1>&#127359;&#65039; Parking Booking Confirmed!</h1></div>',
            '    <div class="content">',
            f"      <p>Dear {escape(greeting_name)},</p>",
            "      <p>Great news! Your parking booking has been <strong>approved</strong> by the admin.</p>",
            '      <div class="success-badge">&#10003; BOOKING CONFIRMED</div>',
            *(f"      {_render_section_html(section)}" for section in sections),
            '      <div class="important-note">',
            "        <strong>&#9888;&#65039; Important:</strong> Please arrive on time and park only in "
            f"your designated spot ({escape(slot_label)}). Your booking will automatically expire at the end time.",
            "      </div>",
            "      <p>If you have any questions or need to modify your booking, please contact the parking administrator.</p>",
            f"      <p>Thank you for using {product}!</p>",
            "    </div>",
            '    <div class="footer">',
            f"      <p>This is an automated email from {product} Manager.</p>",
            f"      <p>&copy; {year} {company}. All rights reserved.</p>",
            "    </div>",
            "  </body>",
            "</html>",
        )
    )


def _render_text(
    *,
    greeting_name: str,
    slot_label: str,
    sections: tuple[NotificationSection, ...],
    branding: EmailBranding,
    year: int,
) -> str:
    lines = [
        f"Dear {greeting_name},",
        "",
        "Great news! Your parking booking has been approved by the admin.",
    ]
    for section in sections:
        lines.append("")
        lines.append(section.title)
        lines.extend(f"  {label}: {value}" for label, value in section.rows)
    lines.extend(
        (
            "",
            f"Important: Please arrive on time and park only in your designated spot ({slot_label}). "
            "Your booking will automatically expire at the end time.",
            "",
            f"Thank you for using {branding.product_name}!",
            "",
            f"(c) {year} {branding.company_name}. All rights reserved.",
        )
    )
    return "\n".join(lines)


def render_booking_confirmation(
    event: BookingChangeEvent,
    booking: EnrichedBooking,
    contact: RecipientContact,
    *,
    now: datetime | None = None,
    tz: tzinfo | None = None,
    branding: EmailBranding | None = None,
) -> NotificationPayload:
    """Build the confirmation email for an approved booking.

    The output only depends on the arguments: ``now`` provides the footer year
    and ``tz`` the zone in which booking times are displayed. Missing slot or
    layout data is rendered as ``N/A``.
    """

    tz = tz or timezone.utc
    branding = branding or EmailBranding()
    year = (now or datetime.now(tz=tz)).year

    sections = build_sections(event, booking, tz)
    greeting_name = _display(event.booking.user_name)
    if greeting_name == PLACEHOLDER:
        greeting_name = DEFAULT_GREETING_NAME
    slot_label = _display(booking.slot_label)

    return NotificationPayload(
        booking_id=booking.id,
        recipient=contact.email,
        subject=build_subject(booking),
        preview=build_preview(booking),
        html_body=_render_html(
            greeting_name=greeting_name,
            slot_label=slot_label,
            sections=sections,
            branding=branding,
            year=year,
        ),
        text_body=_render_text(
            greeting_name=greeting_name,
            slot_label=slot_label,
            sections=sections,
            branding=branding,
            year=year,
        ),
        sections=sections,
    )


__all__ = [
    "EmailBranding",
    "PLACEHOLDER",
    "build_preview",
    "build_sections",
    "build_subject",
    "format_date",
    "format_duration",
    "format_time",
    "render_booking_confirmation",
]
