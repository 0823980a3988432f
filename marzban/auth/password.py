"""OAuth2 password-grant authentication against ``/admin/token``."""
from __future__ import annotations

import asyncio
import threading
from typing import Any, Mapping

import httpx

from marzban.errors import AuthenticationError, RemoteError
from marzban.transport.base import Base, Transport, parse_body
from marzban.utils.logging import logger

TOKEN_ENDPOINT = "/admin/token"


class PasswordAuth:
    """Holds the credentials and the session token of one client.

    The token is fetched lazily on the first request and then kept for the
    lifetime of the instance. A pre-supplied token is used as is and no
    exchange is ever made.
    """

    def __init__(self, username: str | None, password: str | None, token: str | None = None):
        self._username = username
        self._password = password
        self._token = token
        self._lock = threading.Lock()
        self._alock: asyncio.Lock | None = None

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def decorate(self, transport: Transport) -> "AuthenticatedTransport":
        return AuthenticatedTransport(transport, self)

    # -------------- token exchange -------------- #
    def _token_request(self) -> dict[str, Any]:
        if self._username is None:
            raise AuthenticationError("No token was supplied and no username is configured.")
        return {
            "data": {
                "grant_type": "password",
                "username": self._username,
                "password": self._password or "",
            },
        }

    def _store(self, resp: httpx.Response) -> str:
        body = parse_body(resp)
        token = body.get("access_token") if isinstance(body, dict) else None
        if not token:
            raise AuthenticationError("Token response did not contain an access_token.")
        self._token = token
        logger.info("Authenticated as %s", self._username)
        return token

    def ensure_token(self, transport: Transport) -> str:
        if self._token is not None:
            return self._token
        with self._lock:
            if self._token is None:
                kwargs = self._token_request()
                logger.debug("Requesting access token for %s", self._username)
                try:
                    resp = transport.request("POST", TOKEN_ENDPOINT, **kwargs)
                except RemoteError as exc:
                    raise AuthenticationError(f"Authentication failed: {exc}") from exc
                self._store(resp)
        return self._token

    async def aensure_token(self, transport: Transport) -> str:
        if self._token is not None:
            return self._token
        if self._alock is None:
            self._alock = asyncio.Lock()
        async with self._alock:
            # callers that queued behind the first exchange reuse its token
            if self._token is None:
                kwargs = self._token_request()
                logger.debug("Requesting access token for %s", self._username)
                try:
                    resp = await transport.arequest("POST", TOKEN_ENDPOINT, **kwargs)
                except RemoteError as exc:
                    raise AuthenticationError(f"Authentication failed: {exc}") from exc
                self._store(resp)
        return self._token


class AuthenticatedTransport(Transport):
    """Wraps a transport, attaching the bearer token to every request."""

    def __init__(self, inner: Transport, auth: PasswordAuth):
        self._inner = inner
        self.auth = auth

    @staticmethod
    def _headers(token: str, headers: Mapping[str, str] | None) -> dict[str, str]:
        return {**(headers or {}), "Authorization": f"Bearer {token}"}

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
        token = self.auth.ensure_token(self._inner)
        return self._inner.request(
            method, path, params=params, json=json, data=data,
            headers=self._headers(token, headers), base=base,
        )

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
        token = await self.auth.aensure_token(self._inner)
        return await self._inner.arequest(
            method, path, params=params, json=json, data=data,
            headers=self._headers(token, headers), base=base,
        )

    # -------------- verb helpers, return parsed bodies -------------- #
    def get(self, path: str, params: Mapping[str, Any] | None = None, *, base: Base = "api") -> Any:
        return parse_body(self.request("GET", path, params=params, base=base))

    def post(self, path: str, json: Any = None, params: Mapping[str, Any] | None = None) -> Any:
        return parse_body(self.request("POST", path, json=json, params=params))

    def put(self, path: str, json: Any = None, params: Mapping[str, Any] | None = None) -> Any:
        return parse_body(self.request("PUT", path, json=json, params=params))

    def delete(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return parse_body(self.request("DELETE", path, params=params))

    async def aget(self, path: str, params: Mapping[str, Any] | None = None, *, base: Base = "api") -> Any:
        return parse_body(await self.arequest("GET", path, params=params, base=base))

    async def apost(self, path: str, json: Any = None, params: Mapping[str, Any] | None = None) -> Any:
        return parse_body(await self.arequest("POST", path, json=json, params=params))

    async def aput(self, path: str, json: Any = None, params: Mapping[str, Any] | None = None) -> Any:
        return parse_body(await self.arequest("PUT", path, json=json, params=params))

    async def adelete(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return parse_body(await self.arequest("DELETE", path, params=params))

    def close(self) -> None:
        self._inner.close()

    async def aclose(self) -> None:
        await self._inner.aclose()
