"""Pytest configuration and fixtures for Marzban SDK tests."""

import json
from typing import Callable, List
from urllib.parse import parse_qs

import httpx
import pytest

import marzban

TOKEN = "token-abc"


class Recorder:
    """httpx.MockTransport handler that records requests and answers from a route table."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.routes = {}
        self.token_calls = 0

    def route(self, method: str, path: str, status: int = 200, **kwargs):
        """Answer ``method path`` with a fresh httpx.Response(status, **kwargs)."""
        self.routes[(method, path)] = (status, kwargs)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/api/admin/token":
            self.token_calls += 1
            if ("POST", request.url.path) in self.routes:
                status, kwargs = self.routes[("POST", request.url.path)]
                return httpx.Response(status, **kwargs)
            return httpx.Response(200, json={"access_token": TOKEN, "token_type": "bearer"})
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(200, json={"method": request.method, "path": request.url.path})
        status, kwargs = route
        return httpx.Response(status, **kwargs)

    # -------------- helpers -------------- #
    @property
    def api_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path != "/api/admin/token"]

    @property
    def last(self) -> httpx.Request:
        return self.api_requests[-1]

    def last_json(self):
        return json.loads(self.last.content)

    def token_form(self) -> dict:
        token_request = next(r for r in self.requests if r.url.path == "/api/admin/token")
        return {k: v[0] for k, v in parse_qs(token_request.content.decode()).items()}


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def settings() -> dict:
    return {
        "domain": "panel.example.com",
        "port": 8000,
        "ssl": False,
        "username": "admin",
        "password": "secret-password",
        "retry_delay": 0,
    }


@pytest.fixture
def client(recorder, settings) -> marzban.Client:
    c = marzban.Client(http_transport=httpx.MockTransport(recorder), **settings)
    yield c
    c.close()


@pytest.fixture
def make_async_client(recorder, settings) -> Callable[..., marzban.AsyncClient]:
    def factory(handler=None, **overrides) -> marzban.AsyncClient:
        return marzban.AsyncClient(
            http_transport=httpx.MockTransport(handler or recorder), **{**settings, **overrides}
        )

    return factory


@pytest.fixture
def sample_user() -> dict:
    return {
        "username": "abc",
        "proxies": {"vmess": {"id": "35e4e39c-7d5c-4f4b-8b71-558e4f37ff53"}},
    }
