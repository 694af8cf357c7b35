from typing import Optional

from enotaris.client.http import ApiClient, parse_model, request_json, request_list
from enotaris.models.office import OfficeItem, OfficeProfile, UpdateOfficeBody


async def get_offices(api: ApiClient) -> list[OfficeItem]:
    """GET /api/v1/offices: active offices, used to pick an office at sign-in."""
    return await request_list(api, OfficeItem, "/api/v1/offices", fallback="Failed to load offices")


async def get_current_office(api: ApiClient, token: Optional[str]) -> OfficeProfile:
    """GET /api/v1/offices/current: the office named in the JWT."""
    fallback = "Gagal memuat profile kantor"
    data = await request_json(api, "GET", "/api/v1/offices/current", token=token, fallback=fallback)
    return parse_model(OfficeProfile, data, fallback)


async def update_office(api: ApiClient, token: Optional[str], body: UpdateOfficeBody) -> OfficeProfile:
    """PUT /api/v1/offices/current (admin only)."""
    fallback = "Gagal menyimpan profile kantor"
    data = await request_json(
        api, "PUT", "/api/v1/offices/current", token=token, json=body.to_json(), fallback=fallback
    )
    return parse_model(OfficeProfile, data, fallback)
