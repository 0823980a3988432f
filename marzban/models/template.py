from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import Field

from marzban.models.base import Payload


class TemplateModify(Payload):
    name: Optional[str] = Field(default=None, max_length=255)
    data_limit: Optional[int] = Field(default=None, ge=0)
    expire_duration: Optional[int] = Field(default=None, ge=0)
    username_prefix: Optional[str] = Field(default=None, min_length=1, max_length=20)
    username_suffix: Optional[str] = Field(default=None, min_length=1, max_length=20)
    inbounds: Optional[Dict[str, List[str]]] = None


class TemplateCreate(TemplateModify):
    inbounds: Dict[str, List[str]]
