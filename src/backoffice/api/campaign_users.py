"""Campaign user endpoints used by the management board."""

from __future__ import annotations

from backoffice.api.client import BackofficeClient
from backoffice.domain.models import CampaignUser
from backoffice.domain.types import ParticipantStatus, UserStatusAction
from backoffice.status.normalization import normalize_status


async def list_campaign_users(client: BackofficeClient, campaign_id: str) -> list[CampaignUser]:
    """List the campaign's users with normalized statuses.

    ``CampaignUser.id`` is the campaign user id; ``user_id`` is the
    influencer's own id.
    """
    data = await client.get_data(
        f"/campaigns/{campaign_id}/users",
        error_message="Failed to get campaign users",
    )
    return [CampaignUser.model_validate(item) for item in data or []]


async def update_campaign_user_status(
    client: BackofficeClient,
    campaign_id: str,
    campaign_user_id: str,
    action: UserStatusAction | ParticipantStatus | str,
) -> None:
    """Move a campaign user to the status named by *action*.

    The board's documented actions are ``UserStatusAction``; later manual
    steps of the lifecycle (``invited``, ``contract_pending`` and so on) go
    through the same endpoint.  Legacy spellings are normalized first.
    """
    await client.request(
        "PUT",
        f"/campaigns/{campaign_id}/users/{campaign_user_id}",
        json={"action": normalize_status(str(action))},
        error_message="Failed to update campaign user status",
    )
