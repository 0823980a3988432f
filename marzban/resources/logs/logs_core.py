from __future__ import annotations

from typing import Any, Callable
from urllib.parse import urlencode

from marzban.auth.password import PasswordAuth
from marzban.errors import PreconditionError


class _LogsCore:
    ENDPOINT = "/core/logs"

    def __init__(self, auth: PasswordAuth, ws_url: str, connect: Callable[..., Any]):
        self._auth = auth
        self._ws_url = ws_url.rstrip("/")
        self._connect = connect

    def _logs_url(self, interval: float) -> str:
        # websocket handshakes cannot carry the bearer header, the token goes in the query
        if not self._auth.is_authenticated:
            raise PreconditionError("Not authenticated. Make an API call first or pass token=.")
        query = urlencode({"interval": interval, "token": self._auth.token})
        return f"{self._ws_url}{self.ENDPOINT}?{query}"

    @staticmethod
    def _decode(message: str | bytes) -> str:
        if isinstance(message, bytes):
            return message.decode("utf-8", errors="replace")
        return message
