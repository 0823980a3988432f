from __future__ import annotations

from typing import Any, Callable, Iterator

from websockets.exceptions import ConnectionClosedOK
from websockets.sync.client import connect as ws_connect

from marzban.auth.password import PasswordAuth
from marzban.errors import PreconditionError
from marzban.resources.logs.logs_core import _LogsCore
from marzban.utils.logging import logger


class Logs(_LogsCore):
    """
    Blocking access to the live core log.

    Example usage::

        for line in client.logs.stream(interval=2):
            print(line)
    """

    def __init__(self, auth: PasswordAuth, ws_url: str, connect: Callable[..., Any] = ws_connect):
        super().__init__(auth, ws_url, connect)
        self._ws: Any = None

    @property
    def is_connected(self) -> bool:
        return self._ws is not None

    def stream(self, interval: float = 1) -> Iterator[str]:
        """
        Yield log lines until the server closes or :meth:`disconnect` is called.

        :param interval: Seconds between server-side polls.
        :raises PreconditionError: not authenticated yet, or a stream is already open.
        :raises websockets.exceptions.ConnectionClosedError: the connection dropped mid-stream.
        """
        url = self._logs_url(interval)
        if self._ws is not None:
            raise PreconditionError("A log stream is already open. Call disconnect() first.")
        self._ws = self._connect(url)
        logger.info("Log stream connection established")
        return self._iter_lines(self._ws)

    def _iter_lines(self, ws: Any) -> Iterator[str]:
        try:
            for message in ws:
                yield self._decode(message)
        except ConnectionClosedOK:
            logger.debug("Log stream closed by the server")
        finally:
            # a newer stream may own self._ws by now, only release this one
            if self._ws is ws:
                self.disconnect()
            else:
                ws.close()

    def disconnect(self) -> None:
        ws, self._ws = self._ws, None
        if ws is None:
            return
        ws.close()
        logger.info("Log stream connection closed")
