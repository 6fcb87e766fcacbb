"""Tests for the backoffice error hierarchy."""

from backoffice.domain.errors import (
    ApiError,
    BackofficeError,
    ClientValidationError,
    EmptySelectionError,
    FeedbackRequiredError,
    InvalidDateError,
    InvalidTransitionError,
    WorkspaceRequiredError,
)


class TestHierarchy:
    """Every error derives from BackofficeError."""

    def test_client_validation_family(self) -> None:
        for cls in (FeedbackRequiredError, EmptySelectionError, InvalidDateError):
            assert issubclass(cls, ClientValidationError)
        assert issubclass(ClientValidationError, BackofficeError)

    def test_other_errors(self) -> None:
        for cls in (ApiError, InvalidTransitionError, WorkspaceRequiredError):
            assert issubclass(cls, BackofficeError)


class TestMessages:
    """Default messages and attributes."""

    def test_feedback_required(self) -> None:
        error = FeedbackRequiredError()
        assert str(error) == "Feedback is required to reject"
        assert error.errors == {"feedback": "Feedback is required to reject"}

    def test_empty_selection(self) -> None:
        assert str(EmptySelectionError()) == "Select at least one item"

    def test_workspace_required(self) -> None:
        assert str(WorkspaceRequiredError()) == "Workspace ID is required"

    def test_invalid_transition_default_reason(self) -> None:
        error = InvalidTransitionError("approved", "curation")
        assert "approved" in str(error)
        assert error.to_status == "curation"

    def test_api_error_keeps_payload(self) -> None:
        payload = {"message": "Campaign not found", "code": "NOT_FOUND"}
        error = ApiError(404, payload, "Campaign not found")
        assert error.payload is payload
        assert str(error) == "Campaign not found (HTTP 404)"
