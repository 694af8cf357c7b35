from typing import Optional

from enotaris.client.http import ApiClient, parse_model, request_json, request_list
from enotaris.models.auth import UserResponse
from enotaris.models.user import CreateUserBody, RoleItem, UpdateUserBody


async def get_roles(api: ApiClient, token: Optional[str]) -> list[RoleItem]:
    return await request_list(api, RoleItem, "/api/v1/roles", token=token, fallback="Failed to load roles")


async def get_users(api: ApiClient, token: Optional[str]) -> list[UserResponse]:
    """GET /api/v1/users (admin only, office from JWT)."""
    return await request_list(api, UserResponse, "/api/v1/users", token=token, fallback="Failed to load users")


async def create_user(api: ApiClient, token: Optional[str], body: CreateUserBody) -> UserResponse:
    fallback = "Failed to create user"
    data = await request_json(api, "POST", "/api/v1/users", token=token, json=body.to_json(), fallback=fallback)
    return parse_model(UserResponse, data, fallback)


async def update_user(api: ApiClient, token: Optional[str], user_id: str, body: UpdateUserBody) -> UserResponse:
    fallback = "Failed to update user"
    data = await request_json(
        api, "PUT", f"/api/v1/users/{user_id}", token=token, json=body.to_json(), fallback=fallback
    )
    return parse_model(UserResponse, data, fallback)


def user_name_map(users: list[UserResponse]) -> dict[str, str]:
    """Map user id to display name (name when set, else email)."""
    return {u.id: u.display_name for u in users}
