"""Sync Client façade."""
from __future__ import annotations

from typing import Any, Callable

from .auth.password import AuthenticatedTransport, PasswordAuth
from .config import Config
from .transport.base import Transport
from .transport.httpx_sync import HttpxSyncTransport
from .utils.logging import set_log_level
# Add resources here
from .resources.admins import Admins
from .resources.core import Core
from .resources.logs import Logs
from .resources.nodes import Nodes
from .resources.system import System
from .resources.templates import Templates
from .resources.users import Users


def _build_config(config: Config | None, settings: dict[str, Any]) -> Config:
    if config is None:
        return Config.create(**{k: v for k, v in settings.items() if v is not None})
    if any(v is not None for v in settings.values()):
        return Config.create(**{**config.model_dump(), **{k: v for k, v in settings.items() if v is not None}})
    return config


class Client:
    """Single public entry-point (sync)."""

    # -------------- resources -------------- #
    admins: Admins
    core: Core
    nodes: Nodes
    users: Users
    templates: Templates
    system: System
    logs: Logs

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

        # -------------- core plumbing -------------- #
        self._transport = transport or HttpxSyncTransport(
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
        self.admins = Admins(secured)
        self.core = Core(secured)
        self.nodes = Nodes(secured)
        self.users = Users(secured)
        self.templates = Templates(secured)
        self.system = System(secured)
        self.logs = Logs(self._auth, self.config.ws_url, **({"connect": ws_connect} if ws_connect else {}))

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Client":
        """Build a client from ``MARZBAN_*`` environment variables (and .env)."""
        return cls(config=Config.load(), **kwargs)

    # ============================================== #
    # Helpers
    # ============================================== #
    @property
    def _transport_with_auth(self) -> AuthenticatedTransport:
        return self._auth.decorate(self._transport)

    @property
    def token(self) -> str | None:
        return self._auth.token

    def authenticate(self) -> str:
        """Fetch the session token now instead of on the first request."""
        return self._auth.ensure_token(self._transport)

    def close(self) -> None:
        self.logs.disconnect()
        self._transport.close()

    # -------------- context mgr -------------- #
    def __enter__(self):  # sync
        return self

    def __exit__(self, *exc):
        self.close()
