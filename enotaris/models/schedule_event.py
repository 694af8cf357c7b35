"""Calendar entries: land plotting, deed signings, tax deadlines."""

from typing import Literal, Optional

from enotaris.models.base import Body, Record

ScheduleEventType = Literal["plotting", "tanda_tangan_akad", "batas_pajak", "lainnya"]


class ScheduleEventItem(Record):
    id: str
    office_id: str
    case_id: Optional[str] = None
    task_id: Optional[str] = None
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    event_type: ScheduleEventType
    start_at: str
    end_at: Optional[str] = None
    all_day: bool = False
    reminder_minutes_before: Optional[int] = None
    created_at: str
    updated_at: str


class CreateScheduleEventBody(Body):
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    event_type: Optional[ScheduleEventType] = None
    start_at: str
    end_at: Optional[str] = None
    all_day: Optional[bool] = None
    reminder_minutes_before: Optional[int] = None
    case_id: Optional[str] = None
    task_id: Optional[str] = None


class UpdateScheduleEventBody(Body):
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    event_type: Optional[ScheduleEventType] = None
    start_at: Optional[str] = None
    end_at: Optional[str] = None
    all_day: Optional[bool] = None
    reminder_minutes_before: Optional[int] = None
    case_id: Optional[str] = None
    task_id: Optional[str] = None
