"""Domain-specific exception classes for the campaign backoffice."""

from __future__ import annotations

from typing import Any


class BackofficeError(Exception):
    """Base class for all errors raised by the backoffice package."""


class InvalidTransitionError(BackofficeError):
    """Raised when a participant status transition is not permitted.

    Attributes:
        from_status: The status the participant was in.
        to_status: The requested target status.
    """

    def __init__(self, from_status: str, to_status: str, reason: str | None = None) -> None:
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(reason or f"Cannot move from '{from_status}' to '{to_status}'")


class ClientValidationError(BackofficeError):
    """Raised when input fails validation before any request is sent.

    Attributes:
        errors: Field name to message mapping, when more than one field failed.
    """

    def __init__(self, message: str, errors: dict[str, str] | None = None) -> None:
        self.errors = dict(errors or {})
        super().__init__(message)


class FeedbackRequiredError(ClientValidationError):
    """Raised when a rejection is attempted without feedback."""

    def __init__(self, message: str = "Feedback is required to reject") -> None:
        super().__init__(message, {"feedback": message})


class EmptySelectionError(ClientValidationError):
    """Raised when a bulk action is attempted with no items selected."""

    def __init__(self, message: str = "Select at least one item") -> None:
        super().__init__(message)


class InvalidDateError(ClientValidationError):
    """Raised when a date fails the campaign scheduling rules."""


class WorkspaceRequiredError(BackofficeError):
    """Raised when a workspace-scoped call is made without a workspace id."""

    def __init__(self) -> None:
        super().__init__("Workspace ID is required")


class ApiError(BackofficeError):
    """Raised when the backoffice API answers with a non-2xx status.

    Attributes:
        status_code: The HTTP status code.
        payload: The JSON error body exactly as the server sent it, or ``None``.
        message: The server ``message`` field, or the fallback for the call.
    """

    def __init__(self, status_code: int, payload: Any, message: str) -> None:
        self.status_code = status_code
        self.payload = payload
        self.message = message
        super().__init__(f"{message} (HTTP {status_code})")
