"""Pieces shared by the httpx sync and async transports."""
from __future__ import annotations

from typing import Any, Mapping

import httpx

from marzban.errors import RemoteError, TimeoutError
from marzban.transport.base import Base
from marzban.utils.logging import logger


class _HttpxCore:
    def __init__(
        self,
        *,
        base_url: str,
        sub_url: str,
        default_headers: Mapping[str, str] | None = None,
        timeout: float = 10.0,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        http_transport: Any = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.sub_url = sub_url.rstrip("/")
        self.default_headers = dict(default_headers or {})
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        # lets tests plug in httpx.MockTransport
        self._http_transport = http_transport

    def _url(self, path: str, base: Base) -> str:
        root = self.sub_url if base == "sub" else self.base_url
        return f"{root}/{path.lstrip('/')}"

    @staticmethod
    def _clean_params(params: Mapping[str, Any] | None) -> dict[str, Any] | None:
        if not params:
            return None
        return {k: v for k, v in params.items() if v is not None}

    def _check_retry(self, exc: httpx.TimeoutException, method: str, url: str, attempt: int) -> None:
        """Raise once ``attempt`` timeouts exceed the retry budget, else log the retry."""
        if attempt > self.max_retries:
            raise TimeoutError(
                f"{method} {url} timed out after {attempt} attempt(s)", attempts=attempt
            ) from exc
        logger.warning("Request timed out. Retrying (%d/%d)...", attempt, self.max_retries)

    @staticmethod
    def _transport_error(exc: httpx.HTTPError, method: str, url: str) -> RemoteError:
        return RemoteError(f"{method} {url} failed: {exc}")
