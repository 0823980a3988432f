"""Async Client façade."""
from __future__ import annotations

from typing import Any, Callable

from .auth.password import AuthenticatedTransport, PasswordAuth
from .client import _build_config
from .config import Config
from .transport.base import Transport
from .transport.httpx_async import HttpxAsyncTransport
from .utils.logging import set_log_level
from .resources.admins import AsyncAdmins
from .resources.core import AsyncCore
from .resources.logs import AsyncLogs
from .resources.nodes import AsyncNodes
from .resources.system import AsyncSystem
from .resources.templates import AsyncTemplates
from .resources.users import AsyncUsers


class AsyncClient:
    """Async variant (uses httpx.AsyncClient under the hood)."""
    admins: AsyncAdmins
    core: AsyncCore
    nodes: AsyncNodes
    users: AsyncUsers
    templates: AsyncTemplates
    system: AsyncSystem
    logs: AsyncLogs

    def __init__(
        self,
        *,
        config: Config | None = None,
        domain: str | None = None,
        port: int | None = None,
        ssl: bool | None = None,
        username: str | None = None,
        password: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        retry_delay: float | None = None,
        max_retries: int | None = None,
        log_level: str | None = None,
        transport: Transport | None = None,
        http_transport: Any = None,
        ws_connect: Callable[..., Any] | None = None,
    ):
        self.config = _build_config(config, dict(
            domain=domain, port=port, ssl=ssl, username=username, password=password, token=token,
            timeout=timeout, retry_delay=retry_delay, max_retries=max_retries, log_level=log_level,
        ))
        if self.config.log_level:
            set_log_level(self.config.log_level.upper())

        self._transport = transport or HttpxAsyncTransport(
            base_url=self.config.base_url,
            sub_url=self.config.origin,
            timeout=self.config.timeout,
            max_retries=self.config.max_retries,
            retry_delay=self.config.retry_delay,
            http_transport=http_transport,
        )
        self._auth = PasswordAuth(self.config.username, self.config.password, self.config.token)

        # -------------- resources -------------- #
        secured = self._transport_with_auth
        self.api: AuthenticatedTransport = secured
        self.admins = AsyncAdmins(secured)
        self.core = AsyncCore(secured)
        self.nodes = AsyncNodes(secured)
        self.users = AsyncUsers(secured)
        self.templates = AsyncTemplates(secured)
        self.system = AsyncSystem(secured)
        self.logs = AsyncLogs(self._auth, self.config.ws_url, **({"connect": ws_connect} if ws_connect else {}))

    @classmethod
    def from_env(cls, **kwargs: Any) -> "AsyncClient":
        return cls(config=Config.load(), **kwargs)

    # ------------------------------------------------- #
    @property
    def _transport_with_auth(self) -> AuthenticatedTransport:
        return self._auth.decorate(self._transport)

    @property
    def token(self) -> str | None:
        return self._auth.token

    async def authenticate(self) -> str:
        return await self._auth.aensure_token(self._transport)

    async def aclose(self) -> None:
        await self.logs.disconnect()
        await self._transport.aclose()

    # ---------------- context mgr ------------------- #
    async def __aenter__(self):  # async context
        return self

    async def __aexit__(self, *exc):
        await self.aclose()
