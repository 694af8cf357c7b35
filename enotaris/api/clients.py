from typing import Optional

from fastapi import APIRouter, Depends, Query

from enotaris.client.http import ApiClient
from enotaris.core.auth import get_api, get_bearer_token
from enotaris.features.listing.service import list_clients

router = APIRouter(prefix="/api/clients", tags=["clients"])


@router.get("")
async def list_clients_endpoint(
    page: Optional[str] = Query(None),
    size: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    type: Optional[str] = Query(None),
    date_from: Optional[str] = Query(None),
    date_to: Optional[str] = Query(None),
    token: str = Depends(get_bearer_token),
    api: ApiClient = Depends(get_api),
):
    """Paged client list with type label, NIK/NPWP and contact columns."""
    filters = {"search": search, "type": type, "date_from": date_from, "date_to": date_to}
    return await list_clients(api, token, page=page, size=size, filters=filters)
