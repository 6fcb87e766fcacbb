"""Influencer catalog search and campaign recommendations."""

from __future__ import annotations

import structlog

from backoffice.api.client import BackofficeClient
from backoffice.domain.models import CatalogFilters, CatalogInfluencer, Recommendation

logger = structlog.get_logger()


async def search_catalog(
    client: BackofficeClient,
    filters: CatalogFilters | None = None,
) -> list[CatalogInfluencer]:
    """List catalog influencers matching *filters*.

    Args:
        client: API client with a workspace selected.
        filters: Optional search filters; unset filters are not sent.

    Returns:
        The matching influencers, in the order the API ranks them.

    Raises:
        WorkspaceRequiredError: If no workspace is selected.
        ApiError: If the API rejects the search.
    """
    params = filters.to_params() if filters else None
    data = await client.get_data(
        "/influencers/catalog",
        params=params,
        error_message="Failed to get influencers catalog",
    )
    influencers = [CatalogInfluencer.model_validate(item) for item in data or []]
    logger.debug("catalog_searched", filters=params or {}, count=len(influencers))
    return influencers


async def get_campaign_recommendations(
    client: BackofficeClient,
    campaign_id: str,
) -> list[Recommendation]:
    """Return the influencers the platform suggests for a campaign."""
    data = await client.get_data(
        f"/influencers/campaigns/{campaign_id}/recommendations",
        error_message="Failed to get campaign recommendations",
    )
    return [Recommendation.model_validate(item) for item in data or []]
