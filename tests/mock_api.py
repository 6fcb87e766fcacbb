"""Mock backoffice API transport and response helpers for tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx

from backoffice.api.client import BackofficeClient

BASE_URL = "http://backoffice.test/api/backoffice"

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """A ``MockTransport`` that keeps every request it answered."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def ok(data: Any = None, status_code: int = 200) -> httpx.Response:
    """A 2xx response wrapping *data* in the API envelope."""
    return httpx.Response(status_code, json={"data": data})


def body_of(request: httpx.Request) -> Any:
    """Decode the JSON body of a recorded request."""
    return json.loads(request.content)


def api_path(request: httpx.Request) -> str:
    """Return the request path relative to the API root."""
    return request.url.path.removeprefix("/api/backoffice")


def make_client(
    handler: Handler, workspace_id: str | None = "ws_1"
) -> tuple[BackofficeClient, RecordingTransport]:
    """Build a client over a recording transport with retry waits disabled."""
    transport = RecordingTransport(handler)
    client = BackofficeClient(
        BASE_URL,
        token="tok_123",
        workspace_id=workspace_id,
        transport=transport,
        retry_attempts=3,
        retry_initial_wait=0,
        retry_max_wait=0,
        retry_jitter=0,
    )
    return client, transport


def routes(table: dict[tuple[str, str], httpx.Response | Handler]) -> Handler:
    """Build a handler answering ``(method, path)`` pairs; anything else is a 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        answer = table.get((request.method, api_path(request)))
        if answer is None:
            return httpx.Response(404, json={"message": "Not found"})
        if callable(answer):
            return answer(request)
        return httpx.Response(answer.status_code, headers=answer.headers, content=answer.content)

    return handler
