"""Campaign influencer endpoints: listing, status, invitations and bulk review."""

from __future__ import annotations

from collections.abc import Sequence

from backoffice.api.client import BackofficeClient
from backoffice.api.validation import optional_members, require_feedback, require_selection
from backoffice.domain.models import Influencer, StatusHistoryEntry
from backoffice.domain.types import ParticipantStatus
from backoffice.status.normalization import normalize_status


async def list_campaign_influencers(
    client: BackofficeClient,
    campaign_id: str,
) -> list[Influencer]:
    """List the influencers of a campaign with normalized statuses."""
    data = await client.get_data(
        f"/campaigns/{campaign_id}/influencers",
        error_message="Failed to get campaign influencers",
    )
    return [Influencer.model_validate(item) for item in data or []]


async def update_influencer_status(
    client: BackofficeClient,
    campaign_id: str,
    influencer_id: str,
    status: str,
    feedback: str | None = None,
) -> None:
    """Set an influencer's status.

    Rejections require feedback; it is checked before the request is sent.

    Raises:
        FeedbackRequiredError: If *status* is ``rejected`` and *feedback* is blank.
    """
    status = normalize_status(status)
    if status == ParticipantStatus.REJECTED:
        feedback = require_feedback(feedback)

    await client.request(
        "PUT",
        f"/campaigns/{campaign_id}/influencers/{influencer_id}/status",
        json={"status": status, **optional_members(feedback=feedback)},
        error_message="Failed to update influencer status",
    )


async def invite_influencer(
    client: BackofficeClient,
    campaign_id: str,
    influencer_id: str,
    message: str | None = None,
) -> None:
    """Invite an influencer to the campaign."""
    await client.request(
        "POST",
        f"/campaigns/{campaign_id}/influencers/invite",
        json={"influencer_id": influencer_id, **optional_members(message=message)},
        error_message="Failed to invite influencer",
    )


async def move_to_curation(
    client: BackofficeClient,
    campaign_id: str,
    influencer_id: str,
    notes: str | None = None,
) -> None:
    """Move an applicant to curation."""
    await client.request(
        "POST",
        f"/campaigns/{campaign_id}/influencers/{influencer_id}/curation",
        json=optional_members(notes=notes),
        error_message="Failed to move influencer to curation",
    )


async def get_influencer_history(
    client: BackofficeClient,
    campaign_id: str,
    influencer_id: str,
) -> list[StatusHistoryEntry]:
    """Return the recorded status changes of an influencer."""
    data = await client.get_data(
        f"/campaigns/{campaign_id}/influencers/{influencer_id}/history",
        error_message="Failed to get influencer history",
    )
    return [StatusHistoryEntry.model_validate(item) for item in data or []]


async def bulk_approve_influencers(
    client: BackofficeClient,
    campaign_id: str,
    influencer_ids: Sequence[str],
    feedback: str | None = None,
) -> None:
    """Approve several influencers in one request.

    Raises:
        EmptySelectionError: If *influencer_ids* is empty.
    """
    ids = require_selection(influencer_ids)
    await client.request(
        "POST",
        f"/campaigns/{campaign_id}/influencers/bulk-approve",
        json={"influencer_ids": ids, **optional_members(feedback=feedback)},
        error_message="Failed to approve influencers",
    )


async def bulk_reject_influencers(
    client: BackofficeClient,
    campaign_id: str,
    influencer_ids: Sequence[str],
    feedback: str,
) -> None:
    """Reject several influencers in one request.

    Raises:
        FeedbackRequiredError: If *feedback* is blank.
        EmptySelectionError: If *influencer_ids* is empty.
    """
    feedback = require_feedback(feedback)
    ids = require_selection(influencer_ids)
    await client.request(
        "POST",
        f"/campaigns/{campaign_id}/influencers/bulk-reject",
        json={"influencer_ids": ids, "feedback": feedback},
        error_message="Failed to reject influencers",
    )
