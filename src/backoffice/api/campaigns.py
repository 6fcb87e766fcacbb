"""Campaign CRUD and banner upload endpoints."""

from __future__ import annotations

from backoffice.api.client import BackofficeClient, unwrap_data
from backoffice.domain.models import CampaignDetail, CampaignListItem, CampaignPayload


async def list_campaigns(client: BackofficeClient) -> list[CampaignListItem]:
    """List the campaigns of the selected workspace."""
    data = await client.get_data("/campaigns", error_message="Failed to get campaigns")
    return [CampaignListItem.model_validate(item) for item in data or []]


async def get_campaign(client: BackofficeClient, campaign_id: str) -> CampaignDetail:
    """Fetch one campaign."""
    data = await client.get_data(
        f"/campaigns/{campaign_id}", error_message="Failed to get campaign"
    )
    return CampaignDetail.model_validate(data)


async def create_campaign(client: BackofficeClient, payload: CampaignPayload) -> CampaignDetail:
    """Create a campaign and return it as stored by the server."""
    body = await client.request(
        "POST",
        "/campaigns",
        json=payload.to_body(),
        error_message="Failed to create campaign",
    )
    return CampaignDetail.model_validate(unwrap_data(body))


async def update_campaign(
    client: BackofficeClient,
    campaign_id: str,
    payload: CampaignPayload,
) -> CampaignDetail | None:
    """Update the members set on *payload*.

    Returns the updated campaign when the server echoes it back.
    """
    body = await client.request(
        "PUT",
        f"/campaigns/{campaign_id}",
        json=payload.to_body(),
        error_message="Failed to update campaign",
    )
    data = unwrap_data(body)
    if not isinstance(data, dict):
        return None
    return CampaignDetail.model_validate(data)


async def delete_campaign(client: BackofficeClient, campaign_id: str) -> None:
    """Delete a campaign."""
    await client.request(
        "DELETE",
        f"/campaigns/{campaign_id}",
        error_message="Failed to delete campaign",
    )


async def upload_campaign_banner(
    client: BackofficeClient,
    campaign_id: str,
    filename: str,
    content: bytes,
    content_type: str = "image/jpeg",
) -> str | None:
    """Upload the campaign banner image and return its URL, if reported."""
    body = await client.request(
        "POST",
        f"/campaigns/{campaign_id}/banner",
        files={"banner": (filename, content, content_type)},
        error_message="Failed to upload banner",
    )
    data = unwrap_data(body)
    if isinstance(data, dict) and data.get("banner"):
        return str(data["banner"])
    return None
