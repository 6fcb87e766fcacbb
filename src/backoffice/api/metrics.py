"""Dashboard and performance metrics endpoints."""

from __future__ import annotations

from backoffice.api.client import BackofficeClient
from backoffice.domain.models import (
    CampaignMetrics,
    ContentMetrics,
    DashboardResponse,
    IdentifiedPost,
    InfluencerMetrics,
)


async def get_dashboard(client: BackofficeClient, campaign_id: str) -> DashboardResponse:
    """Fetch phases, influencers, contents and metrics in one call."""
    data = await client.get_data(
        f"/campaigns/{campaign_id}/dashboard",
        error_message="Failed to get campaign dashboard",
    )
    return DashboardResponse.model_validate(data or {})


async def get_campaign_metrics(client: BackofficeClient, campaign_id: str) -> CampaignMetrics:
    """Fetch aggregate campaign metrics."""
    data = await client.get_data(
        f"/campaigns/{campaign_id}/metrics",
        error_message="Failed to get campaign metrics",
    )
    return CampaignMetrics.model_validate(data or {})


async def get_influencer_metrics(
    client: BackofficeClient,
    campaign_id: str,
) -> list[InfluencerMetrics]:
    """Fetch per-influencer totals."""
    data = await client.get_data(
        f"/campaigns/{campaign_id}/metrics/influencers",
        error_message="Failed to get influencer metrics",
    )
    return [InfluencerMetrics.model_validate(item) for item in data or []]


async def get_content_metrics(
    client: BackofficeClient,
    campaign_id: str,
    content_id: str,
) -> ContentMetrics:
    """Fetch the performance of one published content."""
    data = await client.get_data(
        f"/campaigns/{campaign_id}/contents/{content_id}/metrics",
        error_message="Failed to get content metrics",
    )
    return ContentMetrics.model_validate(data or {})


async def get_identified_posts(
    client: BackofficeClient,
    campaign_id: str,
    phase_id: str | None = None,
) -> list[IdentifiedPost]:
    """List posts identified through the phase hashtags."""
    data = await client.get_data(
        f"/campaigns/{campaign_id}/metrics/identified-posts",
        params={"phase_id": phase_id},
        error_message="Failed to get identified posts",
    )
    return [IdentifiedPost.model_validate(item) for item in data or []]
