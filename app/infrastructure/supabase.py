"""HTTP client configuration for the storage and identity services."""

from __future__ import annotations

from collections.abc import Generator

import httpx

from app.config import Settings, get_settings


def build_service_headers(service_key: str) -> dict[str, str]:
    """Return the headers that authenticate a service-level request.

    The storage gateway expects the key twice: as ``apikey`` for routing and
    as a bearer token for row level security.
    """

    return {
        "apikey": service_key,
        "Authorization": f"Bearer {service_key}",
        "Accept": "application/json",
    }


def create_supabase_client(
    settings: Settings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an ``httpx.Client`` bound to the configured service address."""

    settings = settings or get_settings()
    return httpx.Client(
        base_url=settings.supabase_url.rstrip("/"),
        headers=build_service_headers(settings.supabase_service_role_key),
        timeout=settings.http_timeout_seconds,
        transport=transport,
    )


def get_supabase_client() -> Generator[httpx.Client, None, None]:
    """Yield a service client and close it afterwards."""

    client = create_supabase_client()
    try:
        yield client
    finally:
        client.close()


__all__ = ["build_service_headers", "create_supabase_client", "get_supabase_client"]
