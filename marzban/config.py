"""Connection settings."""
from __future__ import annotations

import ipaddress
import os
import re
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from marzban.errors import ConfigurationError
from marzban.models.base import violations_from

_HOSTNAME_LABEL = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")

ENV_PREFIX = "MARZBAN_"


class Config(BaseModel):
    """Immutable connection configuration. Durations are in seconds."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    domain: str
    port: int = Field(ge=1, le=65535)
    ssl: bool = False
    username: str | None = Field(default=None, min_length=1)
    password: str | None = Field(default=None, min_length=1)
    token: str | None = Field(default=None, min_length=1)
    timeout: float = Field(default=10.0, gt=0)
    retry_delay: float = Field(default=1.0, ge=0)
    max_retries: int = Field(default=3, ge=0)
    log_level: Literal["debug", "info", "warning", "error", "critical"] | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _lower_log_level(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value

    @field_validator("domain")
    @classmethod
    def _check_domain(cls, value: str) -> str:
        try:
            ipaddress.ip_address(value)
            return value
        except ValueError:
            pass
        host = value[:-1] if value.endswith(".") else value
        if not host or len(host) > 253 or not all(_HOSTNAME_LABEL.match(label) for label in host.split(".")):
            raise ValueError("must be a valid hostname")
        return value

    @model_validator(mode="after")
    def _check_credentials(self) -> "Config":
        if self.username is None and self.token is None:
            raise ValueError("either username or token must be provided")
        return self

    @classmethod
    def create(cls, **settings: Any) -> "Config":
        """Validate ``settings``, raising ConfigurationError with every problem found."""
        try:
            return cls(**settings)
        except PydanticValidationError as exc:
            raise ConfigurationError(violations_from(exc)) from exc

    @classmethod
    def load(cls, **overrides: Any) -> "Config":
        """Load config from env/.env, explicit ``overrides`` win."""
        load_dotenv()
        settings: dict[str, Any] = {}
        for name in cls.model_fields:
            value = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if value is not None and value != "":
                settings[name] = value
        settings.update({k: v for k, v in overrides.items() if v is not None})
        return cls.create(**settings)

    # -------------- addresses -------------- #
    @property
    def netloc(self) -> str:
        host = f"[{self.domain}]" if ":" in self.domain else self.domain
        return f"{host}:{self.port}"

    @property
    def origin(self) -> str:
        return f"{'https' if self.ssl else 'http'}://{self.netloc}"

    @property
    def base_url(self) -> str:
        return f"{self.origin}/api"

    @property
    def ws_url(self) -> str:
        return f"{'wss' if self.ssl else 'ws'}://{self.netloc}/api"
