from enotaris.client.http import ApiClient, parse_model, request_json
from enotaris.models.auth import LoginRequest, LoginResult


async def login(api: ApiClient, body: LoginRequest) -> LoginResult:
    """POST /api/v1/auth/login"""
    data = await request_json(api, "POST", "/api/v1/auth/login", json=body.to_json(), fallback="Login failed")
    return parse_model(LoginResult, data, "Login failed")


async def logout(api: ApiClient, token: str) -> None:
    """POST /api/v1/auth/logout (requires Bearer token)."""
    await request_json(api, "POST", "/api/v1/auth/logout", token=token, fallback="Logout failed")
