"""Campaign chat message endpoints."""

from __future__ import annotations

from backoffice.api.client import BackofficeClient, unwrap_data
from backoffice.api.validation import optional_members
from backoffice.domain.models import ChatMessage


async def list_messages(
    client: BackofficeClient,
    campaign_id: str,
    influencer_id: str,
) -> list[ChatMessage]:
    """List the messages with an influencer, newest first as the API returns them."""
    data = await client.get_data(
        f"/campaigns/{campaign_id}/influencers/{influencer_id}/messages",
        error_message="Failed to get messages",
    )
    return [ChatMessage.model_validate(item) for item in data or []]


async def send_message(
    client: BackofficeClient,
    campaign_id: str,
    influencer_id: str,
    message: str,
    attachments: list[str] | None = None,
) -> ChatMessage | None:
    """Send a message to an influencer.

    Returns the stored message when the server echoes it back.
    """
    body = await client.request(
        "POST",
        f"/campaigns/{campaign_id}/influencers/{influencer_id}/messages",
        json={"message": message, **optional_members(attachments=attachments)},
        error_message="Failed to send message",
    )
    data = unwrap_data(body)
    if not isinstance(data, dict) or "id" not in data:
        return None
    return ChatMessage.model_validate(data)
