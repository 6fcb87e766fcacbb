"""Workspace management endpoints.

Workspaces are not themselves workspace-scoped, so none of these calls send
the ``Workspace-Id`` header.
"""

from __future__ import annotations

from backoffice.api.client import BackofficeClient, unwrap_data
from backoffice.domain.models import Workspace

PhotoFile = tuple[str, bytes, str]


async def list_workspaces(client: BackofficeClient) -> list[Workspace]:
    """List the workspaces the operator belongs to."""
    data = await client.get_data(
        "/workspaces", workspace_scoped=False, error_message="Failed to get workspaces"
    )
    return [Workspace.model_validate(item) for item in data or []]


async def create_workspace(
    client: BackofficeClient,
    name: str,
    photo: PhotoFile | None = None,
) -> Workspace:
    """Create a workspace, optionally with a photo ``(filename, content, content_type)``."""
    body = await client.request(
        "POST",
        "/workspaces",
        data={"name": name},
        files={"photo": photo} if photo is not None else None,
        workspace_scoped=False,
        error_message="Failed to create workspace",
    )
    return Workspace.model_validate(unwrap_data(body))


async def update_workspace(client: BackofficeClient, workspace_id: str, name: str) -> Workspace:
    """Rename a workspace."""
    body = await client.request(
        "PUT",
        f"/workspaces/{workspace_id}",
        json={"name": name},
        workspace_scoped=False,
        error_message="Failed to update workspace",
    )
    return Workspace.model_validate(unwrap_data(body))


async def delete_workspace(client: BackofficeClient, workspace_id: str) -> None:
    """Delete a workspace."""
    await client.request(
        "DELETE",
        f"/workspaces/{workspace_id}",
        workspace_scoped=False,
        error_message="Failed to delete workspace",
    )


async def upload_workspace_photo(
    client: BackofficeClient,
    workspace_id: str,
    photo: PhotoFile,
) -> Workspace:
    """Replace the workspace photo."""
    body = await client.request(
        "POST",
        f"/workspaces/{workspace_id}/photo",
        files={"photo": photo},
        workspace_scoped=False,
        error_message="Failed to upload workspace photo",
    )
    return Workspace.model_validate(unwrap_data(body))
