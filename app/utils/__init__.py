"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_timezone,
    get_app_timezone,
    parse_iso_datetime,
    resolve_timezone,
)

__all__ = [
    "ensure_timezone",
    "get_app_timezone",
    "parse_iso_datetime",
    "resolve_timezone",
]
