from typing import Optional

from fastapi import APIRouter, Depends, Query

from enotaris.client.http import ApiClient
from enotaris.core.auth import get_api, get_bearer_token
from enotaris.features.listing.service import list_tasks

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("")
async def list_tasks_endpoint(
    page: Optional[str] = Query(None),
    size: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
    due_from: Optional[str] = Query(None),
    due_to: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    sortField: Optional[str] = Query(None),
    sortOrder: Optional[str] = Query(None),
    token: str = Depends(get_bearer_token),
    api: ApiClient = Depends(get_api),
):
    filters = {
        "status": status,
        "due_from": due_from,
        "due_to": due_to,
        "search": search,
        "sort_field": sortField,
        "sort_order": sortOrder,
    }
    return await list_tasks(api, token, page=page, size=size, filters=filters)
