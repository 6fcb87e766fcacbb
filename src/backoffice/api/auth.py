"""Sign-in, registration and password recovery endpoints."""

from __future__ import annotations

from backoffice.api.client import BackofficeClient, unwrap_data


async def sign_in(client: BackofficeClient, email: str, password: str) -> str:
    """Sign in and return the bearer token.

    The token is also installed on *client* for subsequent calls.
    """
    body = await client.request(
        "POST",
        "/auth/login",
        json={"email": email, "password": password},
        workspace_scoped=False,
        authenticated=False,
        error_message="Failed to login",
    )
    token = str(unwrap_data(body)["token"])
    client.use_token(token)
    return token


async def sign_up(
    client: BackofficeClient,
    name: str,
    email: str,
    password: str,
    password_confirmation: str,
) -> None:
    """Register a new backoffice operator."""
    await client.request(
        "POST",
        "/auth/register",
        json={
            "name": name,
            "email": email,
            "password": password,
            "password_confirmation": password_confirmation,
        },
        workspace_scoped=False,
        authenticated=False,
        error_message="Failed to register",
    )


async def forgot_password(client: BackofficeClient, email: str) -> None:
    """Request a password reset code by email."""
    await client.request(
        "POST",
        "/auth/forgot-password",
        json={"email": email},
        workspace_scoped=False,
        authenticated=False,
        error_message="Failed to request password reset",
    )


async def reset_password(client: BackofficeClient, code: str, password: str) -> None:
    """Set a new password using the emailed code."""
    await client.request(
        "POST",
        "/auth/reset-password",
        json={"code": code, "password": password},
        workspace_scoped=False,
        authenticated=False,
        error_message="Failed to reset password",
    )


async def logout(client: BackofficeClient) -> None:
    """Invalidate the current token."""
    await client.request(
        "POST",
        "/auth/logout",
        workspace_scoped=False,
        error_message="Failed to logout",
    )
    client.use_token("")
