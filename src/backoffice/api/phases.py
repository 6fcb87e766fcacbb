"""Campaign phase endpoints."""

from __future__ import annotations

from backoffice.api.client import BackofficeClient, unwrap_data
from backoffice.domain.models import CampaignPhase, PhasePayload


async def list_phases(client: BackofficeClient, campaign_id: str) -> list[CampaignPhase]:
    """List the phases of a campaign in their defined order."""
    data = await client.get_data(
        f"/campaigns/{campaign_id}/phases", error_message="Failed to get campaign phases"
    )
    phases = [CampaignPhase.model_validate(item) for item in data or []]
    return sorted(phases, key=lambda phase: (phase.order is None, phase.order or 0))


async def create_phase(
    client: BackofficeClient,
    campaign_id: str,
    payload: PhasePayload,
) -> CampaignPhase:
    """Add a phase to a campaign."""
    body = await client.request(
        "POST",
        f"/campaigns/{campaign_id}/phases",
        json=payload.to_body(),
        error_message="Failed to create campaign phase",
    )
    return CampaignPhase.model_validate(unwrap_data(body))


async def update_phase(
    client: BackofficeClient,
    campaign_id: str,
    phase_id: str,
    payload: PhasePayload,
) -> None:
    """Update the members set on *payload*."""
    await client.request(
        "PUT",
        f"/campaigns/{campaign_id}/phases/{phase_id}",
        json=payload.to_body(),
        error_message="Failed to update campaign phase",
    )


async def delete_phase(client: BackofficeClient, campaign_id: str, phase_id: str) -> None:
    """Remove a phase from a campaign."""
    await client.request(
        "DELETE",
        f"/campaigns/{campaign_id}/phases/{phase_id}",
        error_message="Failed to delete campaign phase",
    )
