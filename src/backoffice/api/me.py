"""Current operator profile and phone verification."""

from __future__ import annotations

from backoffice.api.client import BackofficeClient
from backoffice.domain.models import User


async def get_current_user(client: BackofficeClient) -> User:
    """Return the signed-in operator."""
    data = await client.get_data(
        "/me", workspace_scoped=False, error_message="Failed to get current user"
    )
    return User.model_validate(data)


async def update_phone(client: BackofficeClient, phone: str) -> None:
    """Register a phone number and trigger a verification code."""
    await client.request(
        "POST",
        "/me/phone",
        json={"phone": phone},
        workspace_scoped=False,
        error_message="Failed to update phone",
    )


async def verify_phone(client: BackofficeClient, phone: str, code: str) -> None:
    """Confirm the phone number with the received code."""
    await client.request(
        "POST",
        "/me/phone/verify",
        json={"phone": phone, "code": code},
        workspace_scoped=False,
        error_message="Failed to verify phone",
    )
