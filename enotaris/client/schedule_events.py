from typing import Optional

from enotaris.client.http import ApiClient, parse_model, request_json, request_list
from enotaris.models.schedule_event import (
    CreateScheduleEventBody,
    ScheduleEventItem,
    UpdateScheduleEventBody,
)


async def get_schedule_events(
    api: ApiClient,
    token: Optional[str],
    *,
    date_from: str,
    date_to: str,
    case_id: Optional[str] = None,
    task_id: Optional[str] = None,
) -> list[ScheduleEventItem]:
    """GET /api/v1/schedule-events?from=YYYY-MM-DD&to=YYYY-MM-DD"""
    params = {"from": date_from, "to": date_to, "case_id": case_id, "task_id": task_id}
    return await request_list(
        api, ScheduleEventItem, "/api/v1/schedule-events", token=token, params=params, fallback="Gagal memuat jadwal"
    )


async def create_schedule_event(
    api: ApiClient, token: Optional[str], body: CreateScheduleEventBody
) -> ScheduleEventItem:
    fallback = "Gagal membuat jadwal"
    data = await request_json(
        api, "POST", "/api/v1/schedule-events", token=token, json=body.to_json(), fallback=fallback
    )
    return parse_model(ScheduleEventItem, data, fallback)


async def update_schedule_event(
    api: ApiClient, token: Optional[str], event_id: str, body: UpdateScheduleEventBody
) -> ScheduleEventItem:
    fallback = "Gagal memperbarui jadwal"
    data = await request_json(
        api, "PUT", f"/api/v1/schedule-events/{event_id}", token=token, json=body.to_json(), fallback=fallback
    )
    return parse_model(ScheduleEventItem, data, fallback)


async def delete_schedule_event(api: ApiClient, token: Optional[str], event_id: str) -> None:
    await request_json(
        api, "DELETE", f"/api/v1/schedule-events/{event_id}", token=token, fallback="Gagal menghapus jadwal"
    )
