"""Transport interface shared by the sync and async clients."""
from __future__ import annotations

from typing import Any, Literal, Mapping

import httpx

from marzban.errors import RemoteError

Base = Literal["api", "sub"]


class Transport:
    """Executes one HTTP exchange and returns the raw response.

    ``base="api"`` targets the ``/api`` namespace, ``base="sub"`` the
    subscription namespace served at the server root.
    """

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        base: Base = "api",
    ) -> httpx.Response:
        raise NotImplementedError

    async def arequest(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        base: Base = "api",
    ) -> httpx.Response:
        raise NotImplementedError

    def close(self) -> None:
        pass

    async def aclose(self) -> None:
        pass


def parse_body(resp: httpx.Response) -> Any:
    """JSON when the server says so, text otherwise, None for an empty body."""
    if not resp.content:
        return None
    if "json" in resp.headers.get("content-type", ""):
        return resp.json()
    return resp.text


def raise_for_status(resp: httpx.Response) -> httpx.Response:
    if resp.is_success:
        return resp
    try:
        detail = resp.json().get("detail")
    except (ValueError, AttributeError):
        detail = resp.text
    raise RemoteError(
        f"API error {resp.status_code} on {resp.request.method} {resp.request.url.path}: {detail}",
        status_code=resp.status_code,
        detail=detail,
    )
