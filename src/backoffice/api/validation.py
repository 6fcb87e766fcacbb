"""Checks applied to request input before anything is sent."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from backoffice.domain.errors import EmptySelectionError, FeedbackRequiredError


def require_feedback(feedback: str | None) -> str:
    """Return *feedback* stripped, or raise if it is missing or blank.

    Raises:
        FeedbackRequiredError: If *feedback* is ``None`` or whitespace-only.
    """
    if feedback is None or not feedback.strip():
        raise FeedbackRequiredError()
    return feedback.strip()


def require_selection(ids: Sequence[str]) -> list[str]:
    """Return *ids* as a list of strings, or raise if nothing is selected.

    Raises:
        EmptySelectionError: If *ids* is empty.
    """
    if not ids:
        raise EmptySelectionError()
    return [str(item) for item in ids]


def optional_members(**members: Any) -> dict[str, Any]:
    """Build a body fragment from the members that have a value."""
    return {key: value for key, value in members.items() if value not in (None, "", [])}
