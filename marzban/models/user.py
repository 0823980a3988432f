from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Optional
from uuid import UUID

from pydantic import Field, StringConstraints, field_validator

from marzban.models.base import Payload

USERNAME_PATTERN = re.compile(r"^(?=\w{3,32}\b)[a-zA-Z0-9-_@.]+(?:_[a-zA-Z0-9-_@.]+)*$")
USERNAME_MESSAGE = (
    "Username can only be 3 to 32 characters and contain a-z, 0-9, and underscores in between."
)

DataLimitResetStrategy = Literal["no_reset", "day", "week", "month", "year"]
InboundTag = Annotated[str, StringConstraints(max_length=500)]


class ProxySettings(Payload):
    id: Optional[UUID] = None
    settings: Optional[Dict[str, Any]] = None
    password: Any = None
    method: Any = None
    flow: Any = None


class UserModify(Payload):
    proxies: Optional[Dict[str, ProxySettings]] = None
    inbounds: Optional[Dict[str, List[InboundTag]]] = None
    expire: Optional[int] = Field(default=None, ge=0)
    data_limit: Optional[int] = Field(default=None, ge=0)
    data_limit_reset_strategy: Optional[DataLimitResetStrategy] = None
    status: Optional[Literal["active", "disabled", "on_hold"]] = None
    note: Any = None
    on_hold_timeout: Optional[datetime] = None
    on_hold_expire_duration: Optional[int] = None


class UserCreate(UserModify):
    username: str
    proxies: Dict[str, ProxySettings]
    status: Literal["active", "on_hold"] = "active"

    @field_validator("username")
    @classmethod
    def _check_username(cls, value: str) -> str:
        if not USERNAME_PATTERN.match(value):
            raise ValueError(USERNAME_MESSAGE)
        return value
