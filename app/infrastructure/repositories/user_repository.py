"""Read access to user contact details kept by the identity service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from urllib.parse import quote

import httpx

from app.domain.entities import RecipientContact
from app.domain.exceptions import IdentityServiceError, RecipientNotFoundError

logger = logging.getLogger(__name__)

ADMIN_USERS_PATH = "/auth/v1/admin/users"


class UserRepository:
    """Resolve users through the administrative user-lookup endpoint."""

    def __init__(self, client: httpx.Client) -> None:
        self.client = client

    def get_contact(self, user_id: str) -> RecipientContact:
        """Return the email address registered for ``user_id``.

        The id is escaped as a single path segment so it cannot leave the
        admin users endpoint.
        """

        if user_id in {".", ".."}:
            raise RecipientNotFoundError()

        try:
            response = self.client.get(f"{ADMIN_USERS_PATH}/{quote(user_id, safe='')}")
        except httpx.HTTPError as exc:
            raise IdentityServiceError(f"User lookup failed: {exc}") from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            raise RecipientNotFoundError()
        if response.status_code >= 400:
            logger.error(
                "User lookup for %s failed with status %s", user_id, response.status_code
            )
            raise IdentityServiceError(
                f"User lookup failed with status {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise IdentityServiceError("User lookup returned invalid JSON") from exc

        email = data.get("email") if isinstance(data, Mapping) else None
        if not isinstance(email, str) or not email.strip():
            raise RecipientNotFoundError()

        return RecipientContact(user_id=user_id, email=email.strip())


__all__ = ["ADMIN_USERS_PATH", "UserRepository"]
