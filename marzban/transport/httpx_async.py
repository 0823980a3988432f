from __future__ import annotations

import asyncio
from typing import Any, Mapping

import httpx

from marzban.transport.base import Base, Transport, raise_for_status
from marzban.transport.httpx_core import _HttpxCore
from marzban.utils.logging import logger


class HttpxAsyncTransport(_HttpxCore, Transport):
    """Async variant over ``httpx.AsyncClient``."""

    def __init__(self, **kwargs: Any):
        super().__init__(**kwargs)
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers=self.default_headers,
                timeout=self.timeout,
                transport=self._http_transport,
            )
        return self._client

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
        url = self._url(path, base)
        attempt = 0
        while True:
            logger.debug("%s %s", method, url)
            try:
                resp = await self.client.request(
                    method, url, params=self._clean_params(params), json=json, data=data, headers=headers
                )
            except httpx.TimeoutException as exc:
                attempt += 1
                self._check_retry(exc, method, url, attempt)
                await asyncio.sleep(self.retry_delay)
                continue
            except httpx.HTTPError as exc:
                raise self._transport_error(exc, method, url) from exc
            return raise_for_status(resp)

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
