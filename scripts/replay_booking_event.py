"""Replay a stored booking webhook body through the notification pipeline."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from pydantic import ValidationError

from app.application.use_cases.notifications import (
    EmailBranding,
    send_booking_confirmation,
)
from app.config import get_settings
from app.domain.exceptions import BookingNotificationError
from app.infrastructure.logging_config import setup_logging
from app.infrastructure.notifications import LoggingNotifier, build_notifier
from app.infrastructure.repositories import BookingRepository, UserRepository
from app.infrastructure.supabase import create_supabase_client
from app.interfaces.api.schemas import BookingWebhookPayload
from app.utils import get_app_timezone


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the replay."""

    parser = argparse.ArgumentParser(
        description="Feed a booking webhook JSON document through the notifier.",
    )
    parser.add_argument(
        "payload",
        type=Path,
        help="Path to a JSON file holding the webhook body (record/old_record).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only record the rendered notification in the log, even if SendGrid is configured.",
    )
    return parser.parse_args()


def main() -> None:
    """Process the webhook body and print the outcome as JSON."""

    args = parse_args()
    setup_logging()
    settings = get_settings()

    try:
        raw_payload = json.loads(args.payload.read_text(encoding="utf-8"))
        event = BookingWebhookPayload.model_validate(raw_payload).to_change_event()
    except (OSError, ValueError, ValidationError) as exc:
        raise SystemExit(f"Could not read booking event: {exc}") from exc

    notifier = LoggingNotifier() if args.dry_run else build_notifier(settings)
    with create_supabase_client(settings) as client:
        try:
            outcome = send_booking_confirmation(
                event,
                bookings=BookingRepository(client),
                users=UserRepository(client),
                notifier=notifier,
                tz=get_app_timezone(),
                branding=EmailBranding(
                    product_name=settings.brand_name,
                    company_name=settings.company_name,
                ),
            )
        except BookingNotificationError as exc:
            raise SystemExit(f"Booking notification failed: {exc}") from exc

    result = {"success": outcome.success, "message": outcome.message}
    if outcome.dispatch is not None:
        result["recipient"] = outcome.dispatch.recipient
        result["entityId"] = outcome.dispatch.booking_id
        result["delivered"] = outcome.dispatch.delivered
    print(json.dumps(result, indent=2))
    if not outcome.success:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
