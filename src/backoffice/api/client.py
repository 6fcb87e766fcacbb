"""Async HTTP client for the backoffice REST API.

Wraps ``httpx.AsyncClient`` and applies the headers every backoffice call
carries: ``Client-Type: backoffice``, the bearer token, and the selected
workspace for workspace-scoped resources.  Error responses become
``ApiError`` carrying the server's JSON body unchanged.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from backoffice.config import Settings
from backoffice.domain.errors import ApiError, WorkspaceRequiredError
from backoffice.resilience.retry import resilient_api_call

logger = structlog.get_logger()

CLIENT_TYPE = "backoffice"


def _clean_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
    if params is None:
        return None
    cleaned = {key: value for key, value in params.items() if value is not None and value != ""}
    return cleaned or None


class BackofficeClient:
    """Typed entry point for all backoffice API calls.

    Args:
        base_url: API root, e.g. ``http://localhost:3000/api/backoffice``.
        token: Bearer token of the signed-in operator.
        workspace_id: Selected workspace; required by workspace-scoped calls.
        timeout: Per-request timeout in seconds.
        transport: Optional ``httpx`` transport (tests pass a ``MockTransport``).
        retry_attempts: Attempts for idempotent GETs on transport failures.
        retry_initial_wait: First backoff interval in seconds.
        retry_max_wait: Upper bound for a single backoff interval.
        retry_jitter: Maximum random seconds added to each interval.
    """

    def __init__(
        self,
        base_url: str,
        token: str = "",
        workspace_id: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
        retry_attempts: int = 3,
        retry_initial_wait: float = 1.0,
        retry_max_wait: float = 30.0,
        retry_jitter: float = 5.0,
    ) -> None:
        self._token = token
        self._workspace_id = workspace_id or None
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )

        async def send_idempotent(request: httpx.Request) -> httpx.Response:
            return await self._http.send(request)

        self._send_idempotent = resilient_api_call(
            "backoffice",
            attempts=retry_attempts,
            initial_wait=retry_initial_wait,
            max_wait=retry_max_wait,
            jitter=retry_jitter,
        )(send_idempotent)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> BackofficeClient:
        """Build a client from application settings."""
        return cls(
            base_url=settings.api_base_url,
            token=settings.api_token.get_secret_value(),
            workspace_id=settings.workspace_id or None,
            timeout=settings.request_timeout,
            transport=transport,
            retry_attempts=settings.retry_attempts,
            retry_initial_wait=settings.retry_initial_wait,
            retry_max_wait=settings.retry_max_wait,
            retry_jitter=settings.retry_jitter,
        )

    async def __aenter__(self) -> BackofficeClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._http.aclose()

    @property
    def workspace_id(self) -> str | None:
        """Return the selected workspace id, if any."""
        return self._workspace_id

    def use_workspace(self, workspace_id: str | None) -> None:
        """Select the workspace sent with workspace-scoped calls."""
        self._workspace_id = workspace_id or None

    def use_token(self, token: str) -> None:
        """Replace the bearer token, e.g. after signing in."""
        self._token = token

    def _headers(self, workspace_scoped: bool, authenticated: bool) -> dict[str, str]:
        headers = {"Accept": "application/json", "Client-Type": CLIENT_TYPE}
        if authenticated and self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        if workspace_scoped:
            if not self._workspace_id:
                raise WorkspaceRequiredError()
            headers["Workspace-Id"] = self._workspace_id
        return headers

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        workspace_scoped: bool = True,
        authenticated: bool = True,
        error_message: str = "Request failed",
    ) -> Any:
        """Send a request and return the parsed JSON body.

        GET requests are retried on transport failures; other methods are
        sent exactly once.

        Args:
            method: HTTP method.
            path: Path relative to the API root, e.g. ``/campaigns``.
            json: JSON body.
            params: Query parameters; ``None`` and empty values are dropped.
            files: Multipart files, as accepted by ``httpx``.
            data: Multipart form fields sent alongside *files*.
            workspace_scoped: Send the ``Workspace-Id`` header.
            authenticated: Send the bearer token.
            error_message: Fallback message when the error body has none.

        Returns:
            The decoded JSON body, or ``None`` for an empty body.

        Raises:
            WorkspaceRequiredError: If the call is workspace-scoped and no
                workspace is selected.  Nothing is sent.
            ApiError: If the server answers with a non-2xx status.
        """
        headers = self._headers(workspace_scoped, authenticated)
        request = self._http.build_request(
            method,
            path,
            headers=headers,
            json=json,
            params=_clean_params(params),
            files=files,
            data=data,
        )

        if method.upper() == "GET":
            response = await self._send_idempotent(request)
        else:
            response = await self._http.send(request)

        if response.is_error:
            raise self._error_from(response, error_message)

        if not response.content:
            return None
        return response.json()

    async def get_data(self, path: str, **kwargs: Any) -> Any:
        """GET *path* and return the ``data`` member of the response envelope."""
        body = await self.request("GET", path, **kwargs)
        return unwrap_data(body)

    @staticmethod
    def _error_from(response: httpx.Response, error_message: str) -> ApiError:
        try:
            payload: Any = response.json()
        except ValueError:
            payload = None

        message = error_message
        if isinstance(payload, dict) and payload.get("message"):
            message = str(payload["message"])

        logger.error(
            "api_request_failed",
            method=response.request.method,
            url=str(response.request.url),
            status_code=response.status_code,
            message=message,
        )
        return ApiError(response.status_code, payload, message)


def unwrap_data(body: Any) -> Any:
    """Return ``body["data"]`` for enveloped responses, else *body* itself."""
    if isinstance(body, dict) and "data" in body:
        return body["data"]
    return body
