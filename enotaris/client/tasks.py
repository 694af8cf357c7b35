from typing import Optional

from enotaris.client.http import ApiClient, paged, parse_model, request_json, request_list
from enotaris.models.task import (
    CreateTaskBody,
    ListTasksResult,
    TaskHistoryItem,
    TaskResponse,
    UpdateTaskBody,
)


async def get_tasks_list(
    api: ApiClient,
    token: Optional[str],
    *,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
    status: Optional[str] = None,
    due_from: Optional[str] = None,
    due_to: Optional[str] = None,
) -> ListTasksResult:
    """GET /api/v1/tasks: notaris sees every task, staff only their own."""
    fallback = "Gagal memuat daftar tugas"
    params = {"limit": limit, "offset": offset, "status": status, "due_from": due_from, "due_to": due_to}
    data = await request_json(api, "GET", "/api/v1/tasks", token=token, params=params, fallback=fallback)
    return parse_model(ListTasksResult, paged(data), fallback)


async def get_tasks_by_case(api: ApiClient, token: Optional[str], case_id: str) -> list[TaskResponse]:
    return await request_list(
        api, TaskResponse, f"/api/v1/cases/{case_id}/tasks", token=token, fallback="Gagal memuat tahapan"
    )


async def create_task(api: ApiClient, token: Optional[str], body: CreateTaskBody) -> TaskResponse:
    fallback = "Gagal membuat tahapan"
    data = await request_json(api, "POST", "/api/v1/tasks", token=token, json=body.to_json(), fallback=fallback)
    return parse_model(TaskResponse, data, fallback)


async def update_task(api: ApiClient, token: Optional[str], task_id: str, body: UpdateTaskBody) -> TaskResponse:
    fallback = "Gagal memperbarui tahapan"
    data = await request_json(
        api, "PUT", f"/api/v1/tasks/{task_id}", token=token, json=body.to_json(), fallback=fallback
    )
    return parse_model(TaskResponse, data, fallback)


async def get_task_history(api: ApiClient, token: Optional[str], task_id: str) -> list[TaskHistoryItem]:
    """GET /api/v1/tasks/:id/history: oldest change first."""
    return await request_list(
        api, TaskHistoryItem, f"/api/v1/tasks/{task_id}/history", token=token, fallback="Gagal memuat riwayat"
    )
