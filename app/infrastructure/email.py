"""Utility helpers for sending transactional email notifications via SendGrid."""

from __future__ import annotations

import json
import logging
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import From, Mail

from app.domain.exceptions import TransportError

logger = logging.getLogger(__name__)


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a human readable description for a SendGrid error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list):
            messages: list[str] = []
            for item in errors:
                if not isinstance(item, dict):
                    continue
                message = item.get("message")
                field = item.get("field")
                if message and field:
                    messages.append(f"{message} (field: {field})")
                elif message:
                    messages.append(str(message))
            if messages:
                return "; ".join(messages)
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    if isinstance(parsed, list):
        return "; ".join(str(item) for item in parsed)

    return None


def _describe_failure(status_code: Any, details: str | None) -> str:
    if status_code and details:
        return f"SendGrid API request failed with status {status_code}: {details}"
    if status_code:
        return f"SendGrid API request failed with status {status_code}"
    if details:
        return f"SendGrid API request failed: {details}"
    return "SendGrid API request failed"


def build_message(
    *,
    sender: str,
    sender_name: str | None,
    recipient: str,
    subject: str,
    html_content: str,
    plain_text_content: str | None = None,
) -> Mail:
    """Build the SendGrid ``Mail`` object for a single recipient."""

    return Mail(
        from_email=From(sender, sender_name) if sender_name else sender,
        to_emails=[recipient],
        subject=subject,
        html_content=html_content,
        plain_text_content=plain_text_content,
    )


def send_email(api_key: str, message: Mail) -> int:
    """Send ``message`` with SendGrid and return the response status code.

    Raises :class:`TransportError` when the API call fails or answers with a
    non-2xx status. No retry is attempted.
    """

    try:
        client = SendGridAPIClient(api_key)
        response = client.send(message)
    except Exception as exc:
        status_code = getattr(exc, "status_code", None)
        details = _extract_sendgrid_error_details(getattr(exc, "body", None))
        description = _describe_failure(status_code, details)
        if status_code is None and details is None:
            description = f"Error sending email via SendGrid: {exc}"
        logger.error(description)
        raise TransportError(description, status_code=status_code) from exc

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        details = _extract_sendgrid_error_details(getattr(response, "body", None))
        description = _describe_failure(status_code, details)
        logger.error(description)
        raise TransportError(
            description,
            status_code=status_code if isinstance(status_code, int) else None,
        )

    return status_code


__all__ = ["build_message", "send_email"]
