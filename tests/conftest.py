from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest


class FakeAPI:
    """Records requests and replays queued responses through httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response | Callable[[httpx.Request], httpx.Response]] = []

    def queue(self, status_code: int = 200, json_body: object = None, **kwargs) -> None:
        if json_body is not None:
            kwargs["json"] = json_body
        self._responses.append(httpx.Response(status_code, **kwargs))

    def queue_error(self, exc: Exception) -> None:
        def raiser(request: httpx.Request) -> httpx.Response:
            raise exc

        self._responses.append(raiser)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200, json={})
        response = self._responses.pop(0)
        if callable(response):
            return response(request)
        return response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def body(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url="https://wayfound.test",
            transport=httpx.MockTransport(self.handler),
        )


@pytest.fixture
def api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "WAYFOUND_API_KEY",
        "WAYFOUND_AGENT_ID",
        "WAYFOUND_APPLICATION_ID",
        "WAYFOUND_BASE_URL",
        "WAYFOUND_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
