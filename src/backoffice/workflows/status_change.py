"""Guarded participant status changes.

Every manual move is checked against the transition tables before any
request is issued.  The API is the source of truth afterwards; nothing is
recorded locally beyond the log line carrying the transition note.
"""

from __future__ import annotations

import structlog

from backoffice.api.campaign_users import update_campaign_user_status
from backoffice.api.client import BackofficeClient
from backoffice.api.influencers import update_influencer_status
from backoffice.api.validation import require_feedback
from backoffice.domain.types import ParticipantStatus
from backoffice.status.transitions import TransitionDecision, require_transition

logger = structlog.get_logger()


async def change_participant_status(
    client: BackofficeClient,
    campaign_id: str,
    participant_id: str,
    from_status: str,
    to_status: str,
    is_campaign_user: bool,
    feedback: str | None = None,
) -> TransitionDecision:
    """Move one participant to a new status.

    Args:
        client: API client with a workspace selected.
        campaign_id: The campaign the participant belongs to.
        participant_id: Campaign user id, or influencer id when
            *is_campaign_user* is False.
        from_status: Current status, in any known spelling.
        to_status: Requested status, in any known spelling.
        is_campaign_user: Use the campaign-user table and endpoint.
        feedback: Reason shown to the influencer; required for rejections.

    Returns:
        The allowed decision, carrying the transition note.

    Raises:
        InvalidTransitionError: If the move is not permitted.  Nothing is sent.
        FeedbackRequiredError: If rejecting without feedback.  Nothing is sent.
        ApiError: If the API refuses the update.
    """
    decision = require_transition(from_status, to_status, is_campaign_user)
    if decision.to_status == ParticipantStatus.REJECTED:
        feedback = require_feedback(feedback)

    if is_campaign_user:
        await update_campaign_user_status(
            client, campaign_id, participant_id, decision.to_status
        )
    else:
        await update_influencer_status(
            client, campaign_id, participant_id, decision.to_status, feedback
        )

    logger.info(
        "participant_status_changed",
        campaign_id=campaign_id,
        participant_id=participant_id,
        from_status=decision.from_status,
        to_status=decision.to_status,
        campaign_user=is_campaign_user,
        note=decision.note,
    )
    return decision
