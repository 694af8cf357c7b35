from typing import Optional

from enotaris.client.http import ApiClient, paged, parse_model, request_json
from enotaris.models.protocol import (
    CreateProtocolEntryBody,
    ListKlapperResult,
    ListProtocolEntriesResult,
    ProtocolEntry,
    ProtocolStatus,
)


async def get_protocol_entries(
    api: ApiClient,
    token: Optional[str],
    *,
    year: Optional[int] = None,
    jenis: Optional[str] = None,
    status: Optional[ProtocolStatus] = None,
    case_id: Optional[str] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> ListProtocolEntriesResult:
    fallback = "Gagal memuat protokol"
    params = {
        "year": year,
        "jenis": jenis,
        "status": status,
        "case_id": case_id,
        "limit": limit,
        "offset": offset,
    }
    data = await request_json(api, "GET", "/api/v1/protocol-entries", token=token, params=params, fallback=fallback)
    return parse_model(ListProtocolEntriesResult, paged(data), fallback)


async def create_protocol_entry(api: ApiClient, token: Optional[str], body: CreateProtocolEntryBody) -> ProtocolEntry:
    fallback = "Gagal menyimpan protokol"
    data = await request_json(
        api, "POST", "/api/v1/protocol-entries", token=token, json=body.to_json(), fallback=fallback
    )
    return parse_model(ProtocolEntry, data, fallback)


async def get_klapper(
    api: ApiClient,
    token: Optional[str],
    *,
    letter: Optional[str] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> ListKlapperResult:
    """GET /api/v1/klapper: alphabetical party index, filled when deeds enter the repertorium."""
    fallback = "Gagal memuat Buku Klapper"
    params = {"letter": letter.upper() if letter else None, "limit": limit, "offset": offset}
    data = await request_json(api, "GET", "/api/v1/klapper", token=token, params=params, fallback=fallback)
    return parse_model(ListKlapperResult, paged(data), fallback)
