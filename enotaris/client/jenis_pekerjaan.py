from typing import Optional

from enotaris.client.http import ApiClient, parse_model, request_json, request_list
from enotaris.models.jenis_pekerjaan import (
    CreateJenisPekerjaanBody,
    JenisPekerjaanCategory,
    JenisPekerjaanResponse,
    UpdateJenisPekerjaanBody,
)


async def get_jenis_pekerjaan(
    api: ApiClient, token: Optional[str], category: Optional[JenisPekerjaanCategory] = None
) -> list[JenisPekerjaanResponse]:
    return await request_list(
        api,
        JenisPekerjaanResponse,
        "/api/v1/jenis-pekerjaan",
        token=token,
        params={"category": category},
        fallback="Gagal memuat jenis pekerjaan",
    )


async def get_jenis_pekerjaan_by_id(api: ApiClient, token: Optional[str], jenis_id: str) -> JenisPekerjaanResponse:
    fallback = "Jenis pekerjaan tidak ditemukan"
    data = await request_json(api, "GET", f"/api/v1/jenis-pekerjaan/{jenis_id}", token=token, fallback=fallback)
    return parse_model(JenisPekerjaanResponse, data, fallback)


async def create_jenis_pekerjaan(
    api: ApiClient, token: Optional[str], body: CreateJenisPekerjaanBody
) -> JenisPekerjaanResponse:
    fallback = "Gagal membuat jenis pekerjaan"
    data = await request_json(
        api, "POST", "/api/v1/jenis-pekerjaan", token=token, json=body.to_json(), fallback=fallback
    )
    return parse_model(JenisPekerjaanResponse, data, fallback)


async def update_jenis_pekerjaan(
    api: ApiClient, token: Optional[str], jenis_id: str, body: UpdateJenisPekerjaanBody
) -> JenisPekerjaanResponse:
    fallback = "Gagal memperbarui jenis pekerjaan"
    data = await request_json(
        api, "PUT", f"/api/v1/jenis-pekerjaan/{jenis_id}", token=token, json=body.to_json(), fallback=fallback
    )
    return parse_model(JenisPekerjaanResponse, data, fallback)
