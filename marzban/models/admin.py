from __future__ import annotations

from typing import Optional
from urllib.parse import urlsplit

from pydantic import Field, field_validator

from marzban.models.base import Payload

DISCORD_WEBHOOK_PREFIX = "https://discord.com"


class _AdminFields(Payload):
    telegram_id: Optional[int] = None
    discord_webhook: Optional[str] = None

    @field_validator("discord_webhook")
    @classmethod
    def _check_webhook(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return value
        parts = urlsplit(value)
        if not parts.scheme or not parts.netloc:
            raise ValueError("must be a valid uri")
        if not value.startswith(DISCORD_WEBHOOK_PREFIX):
            raise ValueError(f"must start with {DISCORD_WEBHOOK_PREFIX}")
        return value


class AdminCreate(_AdminFields):
    username: str
    is_sudo: bool
    password: str = Field(min_length=8)


class AdminModify(_AdminFields):
    """Full replacement, ``is_sudo`` must always be sent."""

    is_sudo: bool
    password: Optional[str] = Field(default=None, min_length=8)


class AdminPartialModify(_AdminFields):
    is_sudo: Optional[bool] = None
    password: Optional[str] = Field(default=None, min_length=8)
