"""Logging configuration for the API process and helper scripts."""

from __future__ import annotations

import logging
import logging.config
from collections.abc import Iterable

REDACTED = "[REDACTED]"


class SecretRedactionFilter(logging.Filter):
    """Mask configured credentials in log messages and their arguments."""

    def __init__(self, secrets: Iterable[str | None] = ()) -> None:
        super().__init__()
        self.secrets = tuple(secret for secret in secrets if secret)

    def _sanitize(self, value: object) -> object:
        if not isinstance(value, str) or not self.secrets:
            return value
        for secret in self.secrets:
            value = value.replace(secret, REDACTED)
        return value

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self._sanitize(record.msg)
        if isinstance(record.args, tuple):
            record.args = tuple(self._sanitize(item) for item in record.args)
        elif isinstance(record.args, dict):
            record.args = {key: self._sanitize(value) for key, value in record.args.items()}
        return True


def setup_logging() -> None:
    from app.config import get_settings

    settings = get_settings()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "redact_secrets": {
                    "()": SecretRedactionFilter,
                    "secrets": [
                        settings.supabase_service_role_key,
                        settings.sendgrid_api_key,
                    ],
                }
            },
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "filters": ["redact_secrets"],
                }
            },
            "loggers": {
                "": {
                    "handlers": ["console"],
                    "level": settings.log_level.upper(),
                },
                "httpx": {
                    "level": "WARNING",
                },
            },
        }
    )


__all__ = ["REDACTED", "SecretRedactionFilter", "setup_logging"]
