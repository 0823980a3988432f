from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from marzban.transport.base import Transport, parse_body


def path_segment(value: Any) -> str:
    """Percent-encode one URL path segment, slashes included."""
    return quote(str(value), safe="")


class _ResourceBase:
    def __init__(self, transport: Transport):
        self._t = transport

    @staticmethod
    def _get_json(resp: httpx.Response) -> Any:
        return parse_body(resp)


class BaseResource(_ResourceBase):
    """Sync resource, calls ``self._t.request``."""


class BaseAsyncResource(_ResourceBase):
    """Async resource, awaits ``self._t.arequest``."""
