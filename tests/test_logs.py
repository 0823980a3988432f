"""Tests for the live log stream."""

import asyncio
from unittest.mock import Mock

import httpx
import pytest
from websockets.exceptions import ConnectionClosedError, ConnectionClosedOK
from websockets.frames import Close

import marzban
from marzban import PreconditionError

from conftest import TOKEN


class FakeAsyncSocket:
    def __init__(self, messages=(), hold=False, fail=None):
        self.messages = list(messages)
        self.hold = hold
        self.fail = fail
        self.closed = False

    async def __aenter__(self):
        if self.fail:
            raise self.fail
        return self

    async def __aexit__(self, *exc):
        self.closed = True

    def __aiter__(self):
        return self._receive()

    async def _receive(self):
        for message in self.messages:
            yield message
        if self.hold:
            await asyncio.Event().wait()


class FakeSyncSocket:
    def __init__(self, messages=(), end=None):
        self.messages = list(messages)
        self.end = end
        self.closed = False

    def __iter__(self):
        yield from self.messages
        if self.end is not None:
            raise self.end

    def close(self):
        self.closed = True


def _async_client(recorder, socket, **settings):
    connect = Mock(return_value=socket)
    client = marzban.AsyncClient(
        domain="panel.example.com", port=8000, http_transport=httpx.MockTransport(recorder), ws_connect=connect,
        **(settings or {"username": "admin", "password": "secret-password"}),
    )
    return client, connect


@pytest.mark.asyncio
async def test_connect_before_authentication_raises(recorder):
    # Arrange: fresh client, no request made yet
    client, connect = _async_client(recorder, FakeAsyncSocket())

    # Act & Assert: precondition error, no socket opened
    with pytest.raises(PreconditionError, match="Not authenticated"):
        client.logs.connect(print)
    connect.assert_not_called()
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_lines_delivered_to_handler(recorder):
    # Arrange
    client, connect = _async_client(recorder, FakeAsyncSocket(["line 1", b"line 2"]))
    await client.authenticate()
    received = []

    # Act: the task ends when the server stops sending
    task = client.logs.connect(received.append, interval=2)
    await task

    # Assert: query credential in the URL, bytes decoded
    connect.assert_called_once_with(
        f"ws://panel.example.com:8000/api/core/logs?interval=2&token={TOKEN}"
    )
    assert received == ["line 1", "line 2"]
    assert not client.logs.is_connected
    await client.aclose()


@pytest.mark.asyncio
async def test_pre_supplied_token_can_stream_immediately(recorder):
    client, connect = _async_client(recorder, FakeAsyncSocket(["x"]), token="given")
    received = []

    async def on_message(line):
        received.append(line)

    await client.logs.connect(on_message)

    assert received == ["x"]
    assert "token=given" in connect.call_args.args[0]
    await client.aclose()


@pytest.mark.asyncio
async def test_connection_failure_goes_to_error_handler(recorder):
    failure = OSError("connection refused")
    client, _ = _async_client(recorder, FakeAsyncSocket(fail=failure), token="given")
    errors = []

    await client.logs.connect(lambda line: None, on_error=errors.append)

    assert errors == [failure]


@pytest.mark.asyncio
async def test_second_connect_while_active_raises(recorder):
    # Arrange: a stream that stays open
    socket = FakeAsyncSocket(["hello"], hold=True)
    client, connect = _async_client(recorder, socket, token="given")
    client.logs.connect(lambda line: None)
    await asyncio.sleep(0)

    # Act & Assert
    with pytest.raises(PreconditionError, match="already open"):
        client.logs.connect(lambda line: None)
    assert connect.call_count == 1

    # Act: explicit disconnect, then a new stream is allowed
    await client.logs.disconnect()
    assert not client.logs.is_connected
    assert socket.closed
    client.logs.connect(lambda line: None)
    await client.logs.disconnect()


@pytest.mark.asyncio
async def test_disconnect_is_idempotent(recorder):
    client, _ = _async_client(recorder, FakeAsyncSocket(), token="given")

    await client.logs.disconnect()
    await client.logs.disconnect()

    assert not client.logs.is_connected


def test_sync_stream_requires_token(recorder):
    connect = Mock()
    client = marzban.Client(
        domain="x", port=8000, username="a", password="p",
        http_transport=httpx.MockTransport(recorder), ws_connect=connect,
    )

    with pytest.raises(PreconditionError):
        client.logs.stream()
    connect.assert_not_called()


def test_sync_stream_yields_lines(recorder):
    # Arrange
    socket = FakeSyncSocket(["a", b"b"])
    connect = Mock(return_value=socket)
    client = marzban.Client(
        domain="x", port=8000, username="a", password="p",
        http_transport=httpx.MockTransport(recorder), ws_connect=connect,
    )
    client.authenticate()

    # Act
    lines = client.logs.stream(interval=5)

    # Assert: opened on call, a second stream is refused until this one ends
    assert client.logs.is_connected
    with pytest.raises(PreconditionError):
        client.logs.stream()
    assert list(lines) == ["a", "b"]
    assert connect.call_args.args[0] == f"ws://x:8000/api/core/logs?interval=5&token={TOKEN}"
    assert socket.closed
    assert not client.logs.is_connected

    # disconnect with nothing open is a no-op
    client.logs.disconnect()


def _sync_client(recorder, *sockets):
    connect = Mock(side_effect=list(sockets))
    client = marzban.Client(
        domain="x", port=8000, token="given", http_transport=httpx.MockTransport(recorder), ws_connect=connect,
    )
    return client


def test_sync_stream_raises_on_abnormal_close(recorder):
    # Arrange: the connection drops after the first line
    socket = FakeSyncSocket(["first"], end=ConnectionClosedError(Close(1011, "internal error"), None))
    client = _sync_client(recorder, socket)
    received = []

    # Act & Assert: the drop reaches the caller, the stream is still released
    with pytest.raises(ConnectionClosedError):
        for line in client.logs.stream():
            received.append(line)
    assert received == ["first"]
    assert socket.closed
    assert not client.logs.is_connected


def test_sync_stream_ends_quietly_on_normal_close(recorder):
    socket = FakeSyncSocket(["only"], end=ConnectionClosedOK(Close(1000, ""), Close(1000, ""), True))
    client = _sync_client(recorder, socket)

    assert list(client.logs.stream()) == ["only"]
    assert not client.logs.is_connected


def test_stale_generator_does_not_close_newer_stream(recorder):
    # Arrange: stream A is abandoned by disconnect(), stream B opened after it
    old_socket, new_socket = FakeSyncSocket(["a1", "a2"]), FakeSyncSocket(["b1", "b2"])
    client = _sync_client(recorder, old_socket, new_socket)
    old = client.logs.stream()
    next(old)
    client.logs.disconnect()
    new = client.logs.stream()
    next(new)

    # Act: the old generator is closed late
    old.close()

    # Assert: B is still the open stream
    assert client.logs.is_connected
    assert not new_socket.closed
    assert old_socket.closed
    assert list(new) == ["b2"]
    assert not client.logs.is_connected


@pytest.mark.asyncio
async def test_failing_message_handler_goes_to_error_handler(recorder):
    # Arrange: a handler that breaks on the first line
    client, _ = _async_client(recorder, FakeAsyncSocket(["boom", "never"]), token="given")
    failure = RuntimeError("handler failed")
    errors = []

    def on_message(line):
        raise failure

    # Act
    task = client.logs.connect(on_message, on_error=errors.append)
    await task

    # Assert: the task ends cleanly and the failure was reported
    assert errors == [failure]
    assert task.exception() is None
    await client.logs.disconnect()
    assert not client.logs.is_connected
