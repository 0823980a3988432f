from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, IPvAnyAddress

from marzban.models.base import Payload

NodeStatus = Literal["connected", "connecting", "error", "disabled"]

DEFAULT_NODE_PORT = 62050
DEFAULT_NODE_API_PORT = 62051


class NodeCreate(Payload):
    name: str
    address: IPvAnyAddress
    port: int = DEFAULT_NODE_PORT
    api_port: int = DEFAULT_NODE_API_PORT
    usage_coefficient: float = Field(default=1.0, gt=0)
    add_as_new_host: bool = False


class NodeModify(Payload):
    name: Optional[str] = None
    address: Optional[IPvAnyAddress] = None
    port: Optional[int] = None
    api_port: Optional[int] = None
    status: Optional[NodeStatus] = None
    usage_coefficient: Optional[float] = Field(default=None, gt=0)
