"""Tests for the request/authentication/retry engine."""

import asyncio
import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import httpx
import pytest

import marzban
from marzban import AuthenticationError, RemoteError, TimeoutError
from marzban.transport import parse_body

from conftest import TOKEN


def _timing_out(recorder):
    """Handler answering the token exchange and timing out on everything else."""
    def handler(request):
        recorder.requests.append(request)
        if request.url.path == "/api/admin/token":
            return httpx.Response(200, json={"access_token": TOKEN})
        raise httpx.ReadTimeout("timed out", request=request)
    return handler


def test_timeout_retried_max_retries_times(recorder):
    # Arrange: the scenario client, every API request times out
    client = marzban.Client(
        domain="x", port=8000, ssl=False, username="a", password="p", max_retries=2, retry_delay=0.01,
        http_transport=httpx.MockTransport(_timing_out(recorder)),
    )

    # Act & Assert: 1 attempt + 2 retries, then the timeout surfaces
    with pytest.raises(TimeoutError) as info:
        client.system.get_system_stats()
    assert len(recorder.api_requests) == 3
    assert info.value.attempts == 3
    assert isinstance(info.value.__cause__, httpx.TimeoutException)


def test_retry_waits_retry_delay_between_attempts(recorder, settings):
    client = marzban.Client(
        http_transport=httpx.MockTransport(_timing_out(recorder)), **{**settings, "retry_delay": 0.5, "max_retries": 3}
    )

    with patch("marzban.transport.httpx_sync.time.sleep") as sleep:
        with pytest.raises(TimeoutError):
            client.core.get_core_stats()

    # Assert: one fixed-delay sleep per retry, no backoff
    assert [c.args[0] for c in sleep.call_args_list] == [0.5, 0.5, 0.5]


def test_zero_retries_means_single_attempt(recorder, settings):
    client = marzban.Client(http_transport=httpx.MockTransport(_timing_out(recorder)), **{**settings, "max_retries": 0})

    with pytest.raises(TimeoutError):
        client.core.get_core_stats()

    assert len(recorder.api_requests) == 1


def test_non_timeout_failure_not_retried(recorder, settings):
    # Arrange: connection refused on every API request
    def handler(request):
        recorder.requests.append(request)
        if request.url.path == "/api/admin/token":
            return httpx.Response(200, json={"access_token": TOKEN})
        raise httpx.ConnectError("refused", request=request)

    client = marzban.Client(http_transport=httpx.MockTransport(handler), **settings)

    # Act & Assert: surfaces immediately as a RemoteError
    with pytest.raises(RemoteError) as info:
        client.core.get_core_stats()
    assert info.value.status_code is None
    assert len(recorder.api_requests) == 1


def test_error_status_not_retried(client, recorder):
    # Arrange: panel answers 404 with a detail message
    recorder.route("GET", "/api/user/ghost", status=404, json={"detail": "User not found"})

    # Act & Assert
    with pytest.raises(RemoteError) as info:
        client.users.get_user("ghost")
    assert info.value.status_code == 404
    assert info.value.detail == "User not found"
    assert len(recorder.api_requests) == 1


def test_authenticates_once_and_reuses_token(client, recorder):
    # Act: several calls on a fresh client
    client.system.get_system_stats()
    client.system.get_inbounds()
    client.nodes.get_nodes()

    # Assert: one password-grant exchange, bearer token on every call
    assert recorder.token_calls == 1
    assert recorder.token_form() == {"grant_type": "password", "username": "admin", "password": "secret-password"}
    token_request = recorder.requests[0]
    assert token_request.headers["content-type"] == "application/x-www-form-urlencoded"
    assert all(r.headers["authorization"] == f"Bearer {TOKEN}" for r in recorder.api_requests)
    assert client.token == TOKEN


def test_pre_supplied_token_skips_authentication(recorder):
    client = marzban.Client(domain="x", port=8000, token="given", http_transport=httpx.MockTransport(recorder))

    for _ in range(5):
        client.users.get_users()

    assert recorder.token_calls == 0
    assert recorder.last.headers["authorization"] == "Bearer given"


def test_rejected_credentials_raise_authentication_error(client, recorder):
    # Arrange: token endpoint refuses
    recorder.route("POST", "/api/admin/token", status=401, json={"detail": "Incorrect username or password"})

    # Act & Assert: not retried, nothing else sent, no token cached
    with pytest.raises(AuthenticationError, match="Incorrect username or password"):
        client.system.get_system_stats()
    assert recorder.token_calls == 1
    assert recorder.api_requests == []
    assert client.token is None


def test_token_response_without_access_token(client, recorder):
    recorder.route("POST", "/api/admin/token", json={"token_type": "bearer"})

    with pytest.raises(AuthenticationError, match="access_token"):
        client.authenticate()


def test_token_exchange_timeouts_are_retried(recorder, settings):
    # Arrange: first token request times out, the second succeeds
    calls = []

    def handler(request):
        if request.url.path == "/api/admin/token":
            calls.append(request)
            if len(calls) == 1:
                raise httpx.ConnectTimeout("slow", request=request)
        return recorder(request)

    client = marzban.Client(http_transport=httpx.MockTransport(handler), **settings)

    # Act
    client.system.get_system_stats()

    # Assert
    assert len(calls) == 2
    assert client.token == TOKEN


def test_subscription_requests_use_root_address(client, recorder):
    recorder.route("GET", "/sub/sub-token", text="dmxlc3M6Ly8=")

    body = client.users.get_user_subscription("sub-token")

    assert str(recorder.last.url) == "http://panel.example.com:8000/sub/sub-token"
    assert body == "dmxlc3M6Ly8="


def test_api_requests_use_api_prefix(client, recorder):
    client.users.get_user("alice")

    assert str(recorder.last.url) == "http://panel.example.com:8000/api/user/alice"


def test_none_query_params_are_dropped(client, recorder):
    client.users.get_users({"offset": 0, "limit": 10, "username": None})

    assert dict(recorder.last.url.params) == {"offset": "0", "limit": "10"}


def test_verb_helpers_return_parsed_body(client, recorder):
    recorder.route("GET", "/api/system", json={"total_user": 3})
    recorder.route("DELETE", "/api/user/alice", json={"detail": "User successfully deleted"})

    assert client.api.get("/system") == {"total_user": 3}
    assert client.api.delete("/user/alice") == {"detail": "User successfully deleted"}
    assert client.api.post("/core/restart") == {"method": "POST", "path": "/api/core/restart"}
    assert client.api.put("/hosts", {"VLESS": []}) == {"method": "PUT", "path": "/api/hosts"}


def test_parse_body_variants():
    assert parse_body(httpx.Response(200, json={"a": 1})) == {"a": 1}
    assert parse_body(httpx.Response(200, text="plain")) == "plain"
    assert parse_body(httpx.Response(204)) is None


# ============================================== #
# async
# ============================================== #
@pytest.mark.asyncio
async def test_async_timeout_retried(recorder, make_async_client):
    client = make_async_client(_timing_out(recorder), max_retries=2, retry_delay=0.01)

    with pytest.raises(TimeoutError):
        await client.system.get_system_stats()

    assert len(recorder.api_requests) == 3
    await client.aclose()


@pytest.mark.asyncio
async def test_concurrent_calls_share_one_authentication(recorder, make_async_client):
    # Arrange: a slow token endpoint so every caller arrives before it answers
    async def handler(request):
        if request.url.path == "/api/admin/token":
            await asyncio.sleep(0.05)
        return recorder(request)

    client = make_async_client(handler)

    # Act: ten racing requests on an unauthenticated client
    results = await asyncio.gather(*(client.users.get_user(f"user{i}") for i in range(10)))

    # Assert: a single sign-in, every request carried its token
    assert recorder.token_calls == 1
    assert len(results) == 10
    assert all(r.headers["authorization"] == f"Bearer {TOKEN}" for r in recorder.api_requests)
    await client.aclose()


@pytest.mark.asyncio
async def test_async_pre_supplied_token(recorder, make_async_client):
    client = make_async_client(username=None, password=None, token="given")

    await client.core.get_core_stats()
    await client.core.get_core_config()

    assert recorder.token_calls == 0
    await client.aclose()


@pytest.mark.asyncio
async def test_async_authentication_failure(recorder, make_async_client):
    recorder.route("POST", "/api/admin/token", status=401, json={"detail": "Incorrect username or password"})
    client = make_async_client()

    with pytest.raises(AuthenticationError):
        await client.authenticate()

    assert client.token is None
    await client.aclose()


def test_retry_is_logged(recorder, settings, caplog):
    client = marzban.Client(http_transport=httpx.MockTransport(_timing_out(recorder)), **{**settings, "max_retries": 2})

    with caplog.at_level("WARNING", logger="marzban"):
        with pytest.raises(TimeoutError):
            client.core.get_core_stats()

    assert [r.getMessage() for r in caplog.records] == [
        "Request timed out. Retrying (1/2)...",
        "Request timed out. Retrying (2/2)...",
    ]


def test_threads_share_one_authentication(recorder, settings):
    # Arrange: a slow token endpoint so every thread arrives before it answers
    def handler(request):
        if request.url.path == "/api/admin/token":
            time.sleep(0.05)
        return recorder(request)

    client = marzban.Client(http_transport=httpx.MockTransport(handler), **settings)

    # Act: eight threads racing on an unauthenticated sync client
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(client.users.get_user, [f"user{i}" for i in range(8)]))

    # Assert: a single sign-in, every request carried its token
    assert recorder.token_calls == 1
    assert len(results) == 8
    assert all(r.headers["authorization"] == f"Bearer {TOKEN}" for r in recorder.api_requests)
    client.close()
