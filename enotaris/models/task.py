"""Tahapan: workflow tasks attached to a case, and their change history."""

from typing import Literal, Optional

from enotaris.models.base import Body, Record

TaskStatus = Literal["todo", "in_progress", "done", "blocked", "waiting"]


class TaskResponse(Record):
    id: str
    case_id: str
    nama_task: str
    assigned_to: Optional[str] = None
    due_date: Optional[str] = None
    status: TaskStatus
    blocked_note: Optional[str] = None
    priority: int = 0
    sort_order: int = 0
    depends_on_task_id: Optional[str] = None
    created_at: str
    updated_at: Optional[str] = None


class TaskListItem(Record):
    """Row of GET /api/v1/tasks (notaris: all tasks; staff: only assigned)."""

    id: str
    case_id: str
    nama_task: str
    status: str
    due_date: Optional[str] = None
    assigned_to: Optional[str] = None
    assigned_to_name: Optional[str] = None
    assigned_by_name: Optional[str] = None
    case_nama_para_pihak: Optional[str] = None
    case_nomor_draft: Optional[str] = None
    depends_on_task_id: Optional[str] = None
    time_estimate: Optional[str] = None
    created_at: str
    updated_at: Optional[str] = None


class ListTasksResult(Record):
    data: list[TaskListItem] = []
    total: int = 0


class CreateTaskBody(Body):
    case_id: str
    nama_task: str
    description: Optional[str] = None
    assigned_to: Optional[str] = None
    due_date: Optional[str] = None
    priority: Optional[int] = None
    sort_order: Optional[int] = None
    depends_on_task_id: Optional[str] = None


class UpdateTaskBody(Body):
    nama_task: Optional[str] = None
    description: Optional[str] = None
    assigned_to: Optional[str] = None
    due_date: Optional[str] = None
    status: Optional[TaskStatus] = None
    blocked_note: Optional[str] = None
    priority: Optional[int] = None
    sort_order: Optional[int] = None


class TaskHistoryItem(Record):
    id: str
    task_id: str
    field: str
    old_value: Optional[str] = None
    new_value: Optional[str] = None
    changed_by: Optional[str] = None
    created_at: str
