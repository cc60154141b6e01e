"""FastAPI dependency utilities."""

from __future__ import annotations

from datetime import tzinfo
from functools import lru_cache

import httpx
from fastapi import Depends

from app.application.use_cases.notifications import EmailBranding
from app.config import get_settings
from app.infrastructure.notifications import Notifier, build_notifier
from app.infrastructure.repositories import BookingRepository, UserRepository
from app.infrastructure.supabase import get_supabase_client
from app.utils import get_app_timezone


def get_booking_repository(
    client: httpx.Client = Depends(get_supabase_client),
) -> BookingRepository:
    """Return a booking repository bound to the request's service client."""

    return BookingRepository(client)


def get_user_repository(
    client: httpx.Client = Depends(get_supabase_client),
) -> UserRepository:
    """Return a user repository bound to the request's service client."""

    return UserRepository(client)


@lru_cache(maxsize=1)
def get_notifier() -> Notifier:
    """Return the notifier selected from configuration on first use."""

    return build_notifier(get_settings())


def get_email_branding() -> EmailBranding:
    settings = get_settings()
    return EmailBranding(product_name=settings.brand_name, company_name=settings.company_name)


def get_display_timezone() -> tzinfo:
    return get_app_timezone()


def reset_dependency_caches() -> None:
    """Forget the cached notifier and timezone so new settings take effect."""

    get_notifier.cache_clear()
    get_app_timezone.cache_clear()
