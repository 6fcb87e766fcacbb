"""Content approval endpoints."""

from __future__ import annotations

from collections.abc import Sequence

from backoffice.api.client import BackofficeClient
from backoffice.api.validation import optional_members, require_feedback, require_selection
from backoffice.domain.models import CampaignContent, ContentEvaluation


async def list_contents(
    client: BackofficeClient,
    campaign_id: str,
    status: str | None = None,
    phase_id: str | None = None,
) -> list[CampaignContent]:
    """List submitted contents, optionally filtered by status and phase."""
    data = await client.get_data(
        f"/campaigns/{campaign_id}/contents",
        params={"status": status, "phase_id": phase_id},
        error_message="Failed to get campaign contents",
    )
    return [CampaignContent.model_validate(item) for item in data or []]


async def approve_content(
    client: BackofficeClient,
    campaign_id: str,
    content_id: str,
    feedback: str | None = None,
    caption_feedback: str | None = None,
    new_submission_deadline: str | None = None,
) -> None:
    """Approve a content submission."""
    await client.request(
        "POST",
        f"/campaigns/{campaign_id}/contents/{content_id}/approve",
        json=optional_members(
            feedback=feedback,
            caption_feedback=caption_feedback,
            new_submission_deadline=new_submission_deadline,
        ),
        error_message="Failed to approve content",
    )


async def reject_content(
    client: BackofficeClient,
    campaign_id: str,
    content_id: str,
    feedback: str,
    caption_feedback: str | None = None,
    new_submission_deadline: str | None = None,
) -> None:
    """Send a content back for adjustments.

    Raises:
        FeedbackRequiredError: If *feedback* is blank.
    """
    feedback = require_feedback(feedback)
    await client.request(
        "POST",
        f"/campaigns/{campaign_id}/contents/{content_id}/reject",
        json={
            "feedback": feedback,
            **optional_members(
                caption_feedback=caption_feedback,
                new_submission_deadline=new_submission_deadline,
            ),
        },
        error_message="Failed to reject content",
    )


async def get_content_evaluation(
    client: BackofficeClient,
    campaign_id: str,
    content_id: str,
) -> ContentEvaluation | None:
    """Return the automated evaluation of a content, if one exists yet."""
    data = await client.get_data(
        f"/campaigns/{campaign_id}/contents/{content_id}/evaluation",
        error_message="Failed to get content evaluation",
    )
    if not data:
        return None
    return ContentEvaluation.model_validate(data)


async def bulk_approve_contents(
    client: BackofficeClient,
    campaign_id: str,
    content_ids: Sequence[str],
    feedback: str | None = None,
    caption_feedback: str | None = None,
    new_submission_deadline: str | None = None,
) -> None:
    """Approve several contents in one request.

    Raises:
        EmptySelectionError: If *content_ids* is empty.
    """
    ids = require_selection(content_ids)
    await client.request(
        "POST",
        f"/campaigns/{campaign_id}/contents/bulk-approve",
        json={
            "content_ids": ids,
            **optional_members(
                feedback=feedback,
                caption_feedback=caption_feedback,
                new_submission_deadline=new_submission_deadline,
            ),
        },
        error_message="Failed to bulk approve contents",
    )


async def bulk_reject_contents(
    client: BackofficeClient,
    campaign_id: str,
    content_ids: Sequence[str],
    feedback: str,
    caption_feedback: str | None = None,
    new_submission_deadline: str | None = None,
) -> None:
    """Send several contents back for adjustments in one request.

    Raises:
        FeedbackRequiredError: If *feedback* is blank.
        EmptySelectionError: If *content_ids* is empty.
    """
    feedback = require_feedback(feedback)
    ids = require_selection(content_ids)
    await client.request(
        "POST",
        f"/campaigns/{campaign_id}/contents/bulk-reject",
        json={
            "content_ids": ids,
            "feedback": feedback,
            **optional_members(
                caption_feedback=caption_feedback,
                new_submission_deadline=new_submission_deadline,
            ),
        },
        error_message="Failed to bulk reject contents",
    )
