from __future__ import annotations

import asyncio
import inspect
from typing import Any, Callable

import websockets
from websockets.exceptions import WebSocketException

from marzban.auth.password import PasswordAuth
from marzban.errors import PreconditionError
from marzban.resources.logs.logs_core import _LogsCore
from marzban.utils.logging import logger

MessageHandler = Callable[[str], Any]
ErrorHandler = Callable[[BaseException], Any]


def _log_error(exc: BaseException) -> None:
    logger.error("Log stream error: %s", exc)


class AsyncLogs(_LogsCore):
    """Live core log delivered to callbacks from a background task."""

    def __init__(self, auth: PasswordAuth, ws_url: str, connect: Callable[..., Any] = websockets.connect):
        super().__init__(auth, ws_url, connect)
        self._task: asyncio.Task | None = None

    @property
    def is_connected(self) -> bool:
        return self._task is not None and not self._task.done()

    def connect(
        self,
        on_message: MessageHandler,
        on_error: ErrorHandler = _log_error,
        interval: float = 1,
    ) -> asyncio.Task:
        """Open the stream and return the task receiving it.

        ``on_message`` gets every line, ``on_error`` connection failures.
        Either may be a coroutine function. Must be called from a running
        event loop.
        """
        url = self._logs_url(interval)
        if self.is_connected:
            raise PreconditionError("A log stream is already open. Call disconnect() first.")
        self._task = asyncio.get_running_loop().create_task(self._run(url, on_message, on_error))
        return self._task

    async def _run(self, url: str, on_message: MessageHandler, on_error: ErrorHandler) -> None:
        try:
            async with self._connect(url) as ws:
                logger.info("Log stream connection established")
                async for message in ws:
                    try:
                        await _call(on_message, self._decode(message))
                    except Exception as exc:
                        # a failing handler ends the stream, the error goes to on_error
                        await _call(on_error, exc)
                        return
        except (WebSocketException, OSError) as exc:
            await _call(on_error, exc)
        finally:
            logger.info("Log stream connection closed")

    async def disconnect(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        if task.done():
            if not task.cancelled() and task.exception() is not None:
                logger.error("Log stream task failed: %s", task.exception())
            return
        task.cancel()
        if task is asyncio.current_task():
            return
        try:
            await task
        except asyncio.CancelledError:
            pass


async def _call(handler: Callable[..., Any], arg: Any) -> None:
    result = handler(arg)
    if inspect.isawaitable(result):
        await result
