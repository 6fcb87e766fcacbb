"""Backoffice notification endpoints."""

from __future__ import annotations

from backoffice.api.client import BackofficeClient
from backoffice.domain.models import Notification


async def list_notifications(client: BackofficeClient) -> list[Notification]:
    """List the operator's notifications."""
    data = await client.get_data("/notifications", error_message="Failed to get notifications")
    return [Notification.model_validate(item) for item in data or []]


async def mark_notification_read(client: BackofficeClient, notification_id: str) -> None:
    """Mark one notification as read."""
    await client.request(
        "PUT",
        f"/notifications/{notification_id}/read",
        error_message="Failed to mark notification as read",
    )


async def mark_all_notifications_read(client: BackofficeClient) -> int:
    """Mark every notification as read and return how many were updated."""
    body = await client.request(
        "PUT",
        "/notifications/read-all",
        error_message="Failed to mark all notifications as read",
    )
    if isinstance(body, dict):
        return int(body.get("updated_count", 0))
    return 0
