"""Public discovery listing ("mural") endpoints.

While the mural is active, influencers can find the campaign and apply to
it on their own until the end date.
"""

from __future__ import annotations

from backoffice.api.client import BackofficeClient
from backoffice.domain.models import MuralStatus


async def activate_mural(client: BackofficeClient, campaign_id: str, end_date: str) -> None:
    """Open the campaign for applications until *end_date* (``YYYY-MM-DD``)."""
    await client.request(
        "POST",
        f"/campaigns/{campaign_id}/mural/activate",
        json={"end_date": end_date},
        error_message="Failed to activate mural",
    )


async def deactivate_mural(client: BackofficeClient, campaign_id: str) -> None:
    """Close the campaign for applications."""
    await client.request(
        "POST",
        f"/campaigns/{campaign_id}/mural/deactivate",
        error_message="Failed to deactivate mural",
    )


async def get_mural_status(client: BackofficeClient, campaign_id: str) -> MuralStatus:
    """Return whether the mural is active and until when."""
    data = await client.get_data(
        f"/campaigns/{campaign_id}/mural/status",
        error_message="Failed to get mural status",
    )
    return MuralStatus.model_validate(data or {})
