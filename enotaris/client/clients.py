from typing import Optional

from enotaris.client.http import ApiClient, paged, parse_model, request_json
from enotaris.models.client import ClientResponse, CreateClientBody, ListClientsResult, UpdateClientBody


async def get_clients(
    api: ApiClient, token: Optional[str], *, limit: Optional[int] = None, offset: Optional[int] = None
) -> ListClientsResult:
    fallback = "Gagal memuat klien"
    data = await request_json(
        api, "GET", "/api/v1/clients", token=token, params={"limit": limit, "offset": offset}, fallback=fallback
    )
    return parse_model(ListClientsResult, paged(data), fallback)


async def get_client(api: ApiClient, token: Optional[str], client_id: str) -> ClientResponse:
    fallback = "Klien tidak ditemukan"
    data = await request_json(api, "GET", f"/api/v1/clients/{client_id}", token=token, fallback=fallback)
    return parse_model(ClientResponse, data, fallback)


async def create_client(api: ApiClient, token: Optional[str], body: CreateClientBody) -> ClientResponse:
    fallback = "Gagal membuat klien"
    data = await request_json(api, "POST", "/api/v1/clients", token=token, json=body.to_json(), fallback=fallback)
    return parse_model(ClientResponse, data, fallback)


async def update_client(
    api: ApiClient, token: Optional[str], client_id: str, body: UpdateClientBody
) -> ClientResponse:
    fallback = "Gagal memperbarui klien"
    data = await request_json(
        api, "PUT", f"/api/v1/clients/{client_id}", token=token, json=body.to_json(), fallback=fallback
    )
    return parse_model(ClientResponse, data, fallback)
