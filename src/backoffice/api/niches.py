"""Niche catalogue endpoint."""

from __future__ import annotations

from backoffice.api.client import BackofficeClient
from backoffice.domain.models import Niche


async def list_niches(client: BackofficeClient) -> list[Niche]:
    """List all niches and sub-niches."""
    data = await client.get_data(
        "/niches", workspace_scoped=False, error_message="Failed to get niches"
    )
    return [Niche.model_validate(item) for item in data or []]


def top_level_niches(niches: list[Niche]) -> list[Niche]:
    """Return the niches that have no parent."""
    return [niche for niche in niches if niche.parent_id is None]


def sub_niches(niches: list[Niche], parent_id: int) -> list[Niche]:
    """Return the children of *parent_id*."""
    return [niche for niche in niches if niche.parent_id == parent_id]
