"""Tests for the backoffice HTTP client."""

from __future__ import annotations

import httpx
import pytest
from mock_api import BASE_URL, api_path, make_client, ok

from backoffice.api.client import BackofficeClient, unwrap_data
from backoffice.config import Settings
from backoffice.domain.errors import ApiError, WorkspaceRequiredError


class TestHeaders:
    """Headers sent with every call."""

    @pytest.mark.anyio()
    async def test_workspace_scoped_call(self) -> None:
        client, transport = make_client(lambda r: ok([]))
        async with client:
            await client.request("GET", "/campaigns")
        headers = transport.last.headers
        assert headers["Client-Type"] == "backoffice"
        assert headers["Authorization"] == "Bearer tok_123"
        assert headers["Workspace-Id"] == "ws_1"
        assert headers["Accept"] == "application/json"

    @pytest.mark.anyio()
    async def test_unscoped_unauthenticated_call(self) -> None:
        client, transport = make_client(lambda r: ok({"token": "t"}))
        async with client:
            await client.request(
                "POST", "/auth/login", json={}, workspace_scoped=False, authenticated=False
            )
        headers = transport.last.headers
        assert "Workspace-Id" not in headers
        assert "Authorization" not in headers
        assert headers["Client-Type"] == "backoffice"

    @pytest.mark.anyio()
    async def test_missing_workspace_sends_nothing(self) -> None:
        client, transport = make_client(lambda r: ok([]), workspace_id=None)
        async with client:
            with pytest.raises(WorkspaceRequiredError):
                await client.request("GET", "/campaigns")
        assert transport.requests == []

    @pytest.mark.anyio()
    async def test_use_workspace_switches_header(self) -> None:
        client, transport = make_client(lambda r: ok([]), workspace_id=None)
        async with client:
            client.use_workspace("ws_2")
            await client.request("GET", "/campaigns")
        assert client.workspace_id == "ws_2"
        assert transport.last.headers["Workspace-Id"] == "ws_2"


class TestResponses:
    """Response decoding and error mapping."""

    @pytest.mark.anyio()
    async def test_error_keeps_server_payload(self) -> None:
        payload = {"message": "Campaign not found", "errors": {"id": ["missing"]}}
        client, _ = make_client(lambda r: httpx.Response(404, json=payload))
        async with client:
            with pytest.raises(ApiError) as exc_info:
                await client.request("GET", "/campaigns/c1", error_message="Failed to get")
        error = exc_info.value
        assert error.status_code == 404
        assert error.payload == payload
        assert error.message == "Campaign not found"

    @pytest.mark.anyio()
    async def test_error_without_json_uses_fallback(self) -> None:
        client, _ = make_client(lambda r: httpx.Response(500, text="<html>oops</html>"))
        async with client:
            with pytest.raises(ApiError) as exc_info:
                await client.request("DELETE", "/campaigns/c1", error_message="Failed to delete")
        assert exc_info.value.payload is None
        assert exc_info.value.message == "Failed to delete"

    @pytest.mark.anyio()
    async def test_empty_body_is_none(self) -> None:
        client, _ = make_client(lambda r: httpx.Response(204))
        async with client:
            assert await client.request("DELETE", "/campaigns/c1") is None

    @pytest.mark.anyio()
    async def test_get_data_unwraps_envelope(self) -> None:
        client, _ = make_client(lambda r: ok([{"id": "c1"}]))
        async with client:
            assert await client.get_data("/campaigns") == [{"id": "c1"}]

    @pytest.mark.anyio()
    async def test_empty_params_dropped(self) -> None:
        client, transport = make_client(lambda r: ok([]))
        async with client:
            await client.get_data("/x", params={"status": None, "phase_id": "", "q": "a"})
        assert dict(transport.last.url.params) == {"q": "a"}
        assert api_path(transport.last) == "/x"


class TestRetry:
    """Only GETs are retried, and only on transport failures."""

    @pytest.mark.anyio()
    async def test_get_retried_after_connect_error(self) -> None:
        calls = {"n": 0}

        def flaky(request: httpx.Request) -> httpx.Response:
            calls["n"] += 1
            if calls["n"] < 3:
                raise httpx.ConnectError("refused", request=request)
            return ok([])

        client, _ = make_client(flaky)
        async with client:
            assert await client.get_data("/campaigns") == []
        assert calls["n"] == 3

    @pytest.mark.anyio()
    async def test_get_gives_up_after_attempts(self) -> None:
        def down(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client, transport = make_client(down)
        async with client:
            with pytest.raises(httpx.ConnectError):
                await client.get_data("/campaigns")
        assert len(transport.requests) == 3

    @pytest.mark.anyio()
    async def test_post_not_retried(self) -> None:
        def down(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client, transport = make_client(down)
        async with client:
            with pytest.raises(httpx.ConnectError):
                await client.request("POST", "/campaigns", json={})
        assert len(transport.requests) == 1

    @pytest.mark.anyio()
    async def test_http_errors_not_retried(self) -> None:
        client, transport = make_client(lambda r: httpx.Response(503, json={}))
        async with client:
            with pytest.raises(ApiError):
                await client.get_data("/campaigns")
        assert len(transport.requests) == 1


class TestConstruction:
    """Client construction helpers."""

    def test_from_settings(self) -> None:
        settings = Settings(
            api_base_url=BASE_URL + "/",
            api_token="secret",  # type: ignore[arg-type]
            workspace_id="ws_9",
        )
        client = BackofficeClient.from_settings(settings)
        assert client.workspace_id == "ws_9"
        assert str(client._http.base_url).rstrip("/") == BASE_URL  # noqa: SLF001

    def test_unwrap_data(self) -> None:
        assert unwrap_data({"data": [1]}) == [1]
        assert unwrap_data({"message": "ok"}) == {"message": "ok"}
        assert unwrap_data(None) is None
