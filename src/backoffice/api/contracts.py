"""Contract endpoints."""

from __future__ import annotations

from backoffice.api.client import BackofficeClient
from backoffice.api.validation import optional_members
from backoffice.domain.models import CampaignContract, ContractTemplate


async def list_contracts(
    client: BackofficeClient,
    campaign_id: str,
    status: str | None = None,
    influencer_id: str | None = None,
) -> list[CampaignContract]:
    """List the campaign's contracts, optionally filtered."""
    data = await client.get_data(
        f"/campaigns/{campaign_id}/contracts",
        params={"status": status, "influencer_id": influencer_id},
        error_message="Failed to get campaign contracts",
    )
    return [CampaignContract.model_validate(item) for item in data or []]


async def send_contract(
    client: BackofficeClient,
    campaign_id: str,
    influencer_id: str,
    template_id: str | None = None,
    expires_at: str | None = None,
) -> None:
    """Send a contract to an influencer, from a template when given."""
    await client.request(
        "POST",
        f"/campaigns/{campaign_id}/contracts/send",
        json={
            "influencer_id": influencer_id,
            **optional_members(template_id=template_id, expires_at=expires_at),
        },
        error_message="Failed to send contract template",
    )


async def list_contract_templates(client: BackofficeClient) -> list[ContractTemplate]:
    """List the contract templates of the workspace."""
    data = await client.get_data(
        "/contracts/templates", error_message="Failed to get contract templates"
    )
    return [ContractTemplate.model_validate(item) for item in data or []]


async def get_contract(
    client: BackofficeClient,
    campaign_id: str,
    contract_id: str,
) -> CampaignContract:
    """Fetch one contract and its signature status."""
    data = await client.get_data(
        f"/campaigns/{campaign_id}/contracts/{contract_id}",
        error_message="Failed to get contract status",
    )
    return CampaignContract.model_validate(data)


async def resend_contract(client: BackofficeClient, campaign_id: str, contract_id: str) -> None:
    """Send an existing contract again."""
    await client.request(
        "POST",
        f"/campaigns/{campaign_id}/contracts/{contract_id}/resend",
        error_message="Failed to resend contract",
    )
