"""Bulk actions over selected participants, scripts and contents.

Per-item actions run concurrently with no atomicity: a partial failure
leaves some items updated and others not, and the result reports which.
Review actions use the server-side bulk endpoints, one request per batch.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Literal

import structlog

from backoffice.api import contents as contents_api
from backoffice.api import influencers as influencers_api
from backoffice.api import scripts as scripts_api
from backoffice.api.campaign_users import update_campaign_user_status
from backoffice.api.client import BackofficeClient
from backoffice.api.validation import require_feedback, require_selection
from backoffice.domain.errors import InvalidTransitionError
from backoffice.domain.types import ParticipantStatus
from backoffice.status.normalization import normalize_status
from backoffice.status.transitions import require_transition

logger = structlog.get_logger()

ReviewAction = Literal["approve", "reject"]


@dataclass
class BulkResult:
    """Per-item outcome of a concurrent bulk action.

    ``failed`` keeps selection order, so ``first_error`` is the error of the
    first selected item that failed.
    """

    succeeded: list[str] = field(default_factory=list)
    failed: dict[str, BaseException] = field(default_factory=dict)

    @property
    def all_succeeded(self) -> bool:
        return not self.failed

    @property
    def first_error(self) -> BaseException | None:
        return next(iter(self.failed.values()), None)


async def _run_each(
    action: str,
    ids: Sequence[str],
    call: Callable[[str], Awaitable[object]],
) -> BulkResult:
    selected = require_selection(ids)
    outcomes = await asyncio.gather(*(call(item) for item in selected), return_exceptions=True)

    result = BulkResult()
    for item, outcome in zip(selected, outcomes, strict=True):
        if isinstance(outcome, Exception):
            result.failed[item] = outcome
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            result.succeeded.append(item)

    if result.failed:
        logger.warning(
            "bulk_action_partial_failure",
            action=action,
            succeeded=len(result.succeeded),
            failed=len(result.failed),
            first_error=str(result.first_error),
        )
    else:
        logger.info("bulk_action_completed", action=action, count=len(result.succeeded))
    return result


async def bulk_update_status(
    client: BackofficeClient,
    campaign_id: str,
    current_statuses: Mapping[str, str],
    status: str,
    feedback: str | None = None,
    is_campaign_user: bool = False,
) -> BulkResult:
    """Set the same status on every selected participant, one request each.

    Every move is checked against the transition table before any request
    is issued, so one disallowed move refuses the whole selection.

    Args:
        client: API client with a workspace selected.
        campaign_id: The campaign the participants belong to.
        current_statuses: Participant id to its current status, in selection
            order.  Ids are influencer ids, or campaign user ids when
            *is_campaign_user*.
        status: Target status, in any known spelling.
        feedback: Reason sent with a rejection; required for ``rejected``.
        is_campaign_user: Use the campaign-user table and endpoint.

    Raises:
        EmptySelectionError: If *current_statuses* is empty.
        InvalidTransitionError: If any selected participant may not move to
            *status*.  Nothing is sent.
        FeedbackRequiredError: If rejecting without feedback.
    """
    ids = require_selection(list(current_statuses))
    target = normalize_status(status)
    for item in ids:
        try:
            require_transition(current_statuses[item], target, is_campaign_user)
        except InvalidTransitionError:
            logger.warning(
                "bulk_status_change_refused",
                campaign_id=campaign_id,
                participant_id=item,
                from_status=normalize_status(current_statuses[item]),
                to_status=target,
            )
            raise
    if target == ParticipantStatus.REJECTED:
        feedback = require_feedback(feedback)

    async def update_one(item: str) -> None:
        if is_campaign_user:
            await update_campaign_user_status(client, campaign_id, item, target)
        else:
            await influencers_api.update_influencer_status(
                client, campaign_id, item, target, feedback
            )

    return await _run_each(f"status:{target}", ids, update_one)


async def bulk_move_to_curation(
    client: BackofficeClient,
    campaign_id: str,
    influencer_ids: Sequence[str],
    notes: str | None = None,
) -> BulkResult:
    """Move selected applicants to curation, one request each."""

    async def move_one(item: str) -> None:
        await influencers_api.move_to_curation(client, campaign_id, item, notes)

    return await _run_each("move_to_curation", influencer_ids, move_one)


def _review_action(action: str) -> ReviewAction:
    if action not in ("approve", "reject"):
        raise ValueError(f"Unknown review action: {action!r}")
    return action  # type: ignore[return-value]


async def bulk_review_influencers(
    client: BackofficeClient,
    campaign_id: str,
    influencer_ids: Sequence[str],
    action: ReviewAction,
    feedback: str | None = None,
) -> None:
    """Approve or reject selected influencers with one bulk request.

    Raises:
        ValueError: If *action* is neither ``approve`` nor ``reject``.
        FeedbackRequiredError: If rejecting without feedback.
        EmptySelectionError: If *influencer_ids* is empty.
    """
    if _review_action(action) == "reject":
        await influencers_api.bulk_reject_influencers(
            client, campaign_id, influencer_ids, require_feedback(feedback)
        )
    else:
        await influencers_api.bulk_approve_influencers(
            client, campaign_id, influencer_ids, feedback
        )
    logger.info(
        "bulk_review", kind="influencers", action=action, count=len(influencer_ids)
    )


async def bulk_review_scripts(
    client: BackofficeClient,
    campaign_id: str,
    script_ids: Sequence[str],
    action: ReviewAction,
    feedback: str | None = None,
) -> None:
    """Approve or reject selected scripts with one bulk request.

    Feedback is ignored when approving; the endpoint takes none.
    """
    if _review_action(action) == "reject":
        await scripts_api.bulk_reject_scripts(
            client, campaign_id, script_ids, require_feedback(feedback)
        )
    else:
        await scripts_api.bulk_approve_scripts(client, campaign_id, script_ids)
    logger.info("bulk_review", kind="scripts", action=action, count=len(script_ids))


async def bulk_review_contents(
    client: BackofficeClient,
    campaign_id: str,
    content_ids: Sequence[str],
    action: ReviewAction,
    feedback: str | None = None,
    caption_feedback: str | None = None,
    new_submission_deadline: str | None = None,
) -> None:
    """Approve or reject selected contents with one bulk request."""
    if _review_action(action) == "reject":
        await contents_api.bulk_reject_contents(
            client,
            campaign_id,
            content_ids,
            require_feedback(feedback),
            caption_feedback,
            new_submission_deadline,
        )
    else:
        await contents_api.bulk_approve_contents(
            client,
            campaign_id,
            content_ids,
            feedback,
            caption_feedback,
            new_submission_deadline,
        )
    logger.info("bulk_review", kind="contents", action=action, count=len(content_ids))
