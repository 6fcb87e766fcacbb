"""Saved influencer lists and adding influencers to a campaign in bulk."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from backoffice.api.client import BackofficeClient
from backoffice.api.validation import optional_members, require_selection
from backoffice.domain.models import InfluencerList, InfluencerListDetail

logger = structlog.get_logger()


async def list_influencer_lists(client: BackofficeClient) -> list[InfluencerList]:
    """List the workspace's saved influencer lists."""
    data = await client.get_data(
        "/influencer-lists", error_message="Failed to get influencer lists"
    )
    return [InfluencerList.model_validate(item) for item in data or []]


async def get_influencer_list(client: BackofficeClient, list_id: str) -> InfluencerListDetail:
    data = await client.get_data(
        f"/influencer-lists/{list_id}", error_message="Failed to get influencer list"
    )
    return InfluencerListDetail.model_validate(data)


async def bulk_add_influencers_to_campaign(
    client: BackofficeClient,
    campaign_id: str,
    influencer_ids: Sequence[str] | None = None,
    list_id: str | None = None,
) -> None:
    """Add influencers to a campaign by id, by saved list, or both.

    Args:
        client: API client with a workspace selected.
        campaign_id: The campaign to add the influencers to.
        influencer_ids: Catalog influencer ids.
        list_id: A saved list whose members are all added.

    Raises:
        EmptySelectionError: If neither ids nor a list is given.  Nothing is
            sent.
        ApiError: If the API rejects the request.
    """
    ids = list(influencer_ids or [])
    if not list_id:
        ids = require_selection(ids)

    await client.request(
        "POST",
        f"/campaigns/{campaign_id}/influencers/bulk-add",
        json=optional_members(influencer_ids=ids, list_id=list_id),
        error_message="Failed to bulk add influencers",
    )
    logger.info(
        "influencers_added_to_campaign",
        campaign_id=campaign_id,
        count=len(ids),
        list_id=list_id,
    )
