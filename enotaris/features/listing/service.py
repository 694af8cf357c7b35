"""List proxies behind the BFF ``/api/cases``, ``/api/clients`` and ``/api/tasks`` routes.

Rows are passed through as the backend sends them, with a few display fields
added. Responses use ``{"data": [...], "totalCount": n}``.
"""

import asyncio
import logging
from datetime import date
from typing import Any, Optional

from enotaris.client.http import ApiClient, paged, request_json
from enotaris.core.config import settings
from enotaris.core.errors import ApiError
from enotaris.core.metrics import degraded_loads_total
from enotaris.core.tracing import start_span
from enotaris.features.views.helpers import is_task_overdue
from enotaris.features.views.labels import CLIENT_TYPE_LABELS

logger = logging.getLogger(__name__)


def clamp_page(page: Optional[str], size: Optional[str]) -> tuple[int, int, int]:
    """Parse and clamp paging params. Returns ``(page, size, offset)``.

    page >= 1 and 1 <= size <= LIST_PAGE_SIZE_MAX. Unparsable values use the defaults.
    """
    page_n = _to_int(page, 1)
    size_n = _to_int(size, settings.LIST_PAGE_SIZE_DEFAULT)
    page_n = max(1, page_n)
    size_n = min(settings.LIST_PAGE_SIZE_MAX, max(1, size_n))
    return page_n, size_n, (page_n - 1) * size_n


def _to_int(value: Optional[str], default: int) -> int:
    if value is None or str(value).strip() == "":
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def pic_names(users: Any) -> dict[str, str]:
    """User id -> stripped name, else email, else id."""
    names: dict[str, str] = {}
    if not isinstance(users, list):
        return names
    for u in users:
        if not isinstance(u, dict) or not u.get("id"):
            continue
        names[u["id"]] = (u.get("name") or "").strip() or u.get("email") or u["id"]
    return names


def enrich_case_row(row: dict, names: dict[str, str]) -> dict:
    pic_id = row.get("staf_penanggung_jawab_id")
    return {**row, "pic_name": names.get(pic_id, pic_id) if pic_id else ""}


def enrich_client_row(row: dict) -> dict:
    return {
        **row,
        "type_label": CLIENT_TYPE_LABELS["entity"] if row.get("type") == "entity" else CLIENT_TYPE_LABELS["individual"],
        "nik_npwp": " / ".join(v for v in (row.get("nik"), row.get("npwp")) if v) or "-",
        "kontak": " · ".join(v for v in (row.get("phone"), row.get("email")) if v) or "-",
        "last_activity": row.get("updated_at") or None,
    }


def enrich_task_row(row: dict, today: Optional[date] = None) -> dict:
    return {**row, "is_overdue": is_task_overdue(row.get("due_date"), row.get("status"), today)}


def _envelope(data: Any, rows: list) -> dict:
    return {"data": rows, "totalCount": paged(data)["total"]}


async def _user_names(api: ApiClient, token: str) -> dict[str, str]:
    try:
        users = await request_json(api, "GET", "/api/v1/users", token=token, fallback="Failed to load users", default=[])
    except ApiError as exc:
        degraded_loads_total.inc(labels={"part": "pic_names"})
        logger.warning("listing.pic_names_degraded", extra={"error_code": exc.code, "status": exc.status_code})
        return {}
    return pic_names(users)


async def list_cases(api: ApiClient, token: str, *, page=None, size=None, filters: Optional[dict] = None) -> dict:
    """Case list page with ``pic_name``. The users request runs alongside and may fail."""
    page_n, limit, offset = clamp_page(page, size)
    params = {"limit": limit, "offset": offset, **(filters or {})}
    with start_span("listing.cases", {"page": page_n, "size": limit}):
        data, names = await asyncio.gather(
            request_json(api, "GET", "/api/v1/cases", token=token, params=params, fallback="Gagal memuat berkas"),
            _user_names(api, token),
        )
    return _envelope(data, [enrich_case_row(r, names) for r in paged(data)["data"]])


async def list_clients(api: ApiClient, token: str, *, page=None, size=None, filters: Optional[dict] = None) -> dict:
    page_n, limit, offset = clamp_page(page, size)
    params = {"limit": limit, "offset": offset, **(filters or {})}
    with start_span("listing.clients", {"page": page_n, "size": limit}):
        data = await request_json(api, "GET", "/api/v1/clients", token=token, params=params, fallback="Gagal memuat klien")
    return _envelope(data, [enrich_client_row(r) for r in paged(data)["data"]])


async def list_tasks(
    api: ApiClient,
    token: str,
    *,
    page=None,
    size=None,
    filters: Optional[dict] = None,
    today: Optional[date] = None,
) -> dict:
    page_n, limit, offset = clamp_page(page, size)
    params = {"limit": limit, "offset": offset, **(filters or {})}
    with start_span("listing.tasks", {"page": page_n, "size": limit}):
        data = await request_json(
            api, "GET", "/api/v1/tasks", token=token, params=params, fallback="Gagal memuat daftar tugas"
        )
    return _envelope(data, [enrich_task_row(r, today) for r in paged(data)["data"]])
