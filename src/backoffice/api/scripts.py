"""Script approval endpoints."""

from __future__ import annotations

from collections.abc import Sequence

from backoffice.api.client import BackofficeClient
from backoffice.api.validation import optional_members, require_feedback, require_selection
from backoffice.domain.models import CampaignScript


async def list_scripts(
    client: BackofficeClient,
    campaign_id: str,
    status: str | None = None,
    phase_id: str | None = None,
) -> list[CampaignScript]:
    """List submitted scripts, optionally filtered by status and phase."""
    data = await client.get_data(
        f"/campaigns/{campaign_id}/scripts",
        params={"status": status, "phase_id": phase_id},
        error_message="Failed to get campaign scripts",
    )
    return [CampaignScript.model_validate(item) for item in data or []]


async def approve_script(client: BackofficeClient, campaign_id: str, script_id: str) -> None:
    """Approve a script."""
    await client.request(
        "POST",
        f"/campaigns/{campaign_id}/scripts/{script_id}/approve",
        error_message="Failed to approve script",
    )


async def reject_script(
    client: BackofficeClient,
    campaign_id: str,
    script_id: str,
    feedback: str,
    new_submission_deadline: str | None = None,
) -> None:
    """Reject a script with feedback.

    Raises:
        FeedbackRequiredError: If *feedback* is blank.
    """
    feedback = require_feedback(feedback)
    await client.request(
        "POST",
        f"/campaigns/{campaign_id}/scripts/{script_id}/reject",
        json={
            "feedback": feedback,
            **optional_members(new_submission_deadline=new_submission_deadline),
        },
        error_message="Failed to reject script",
    )


async def bulk_approve_scripts(
    client: BackofficeClient,
    campaign_id: str,
    script_ids: Sequence[str],
) -> None:
    """Approve several scripts in one request.

    Raises:
        EmptySelectionError: If *script_ids* is empty.
    """
    ids = require_selection(script_ids)
    await client.request(
        "POST",
        f"/campaigns/{campaign_id}/scripts/bulk-approve",
        json={"script_ids": ids},
        error_message="Failed to bulk approve scripts",
    )


async def bulk_reject_scripts(
    client: BackofficeClient,
    campaign_id: str,
    script_ids: Sequence[str],
    feedback: str,
) -> None:
    """Reject several scripts in one request.

    Raises:
        FeedbackRequiredError: If *feedback* is blank.
        EmptySelectionError: If *script_ids* is empty.
    """
    feedback = require_feedback(feedback)
    ids = require_selection(script_ids)
    await client.request(
        "POST",
        f"/campaigns/{campaign_id}/scripts/bulk-reject",
        json={"script_ids": ids, "feedback": feedback},
        error_message="Failed to bulk reject scripts",
    )
