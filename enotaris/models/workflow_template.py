from typing import Optional

from enotaris.models.base import Body, Record


class WorkflowTemplateStepItem(Record):
    id: str
    nama_task: str
    sort_order: int = 0
    assignee_default_id: Optional[str] = None
    due_date_rule: Optional[str] = None
    sla_days: Optional[int] = None
    status_suggestion: Optional[str] = None


class WorkflowTemplateItem(Record):
    id: str
    office_id: str
    name: str
    category: str
    jenis_pekerjaan: Optional[str] = None
    description: Optional[str] = None
    steps: Optional[list[WorkflowTemplateStepItem]] = None
    created_at: str
    updated_at: str


class CreateWorkflowTemplateStepBody(Body):
    nama_task: str
    sort_order: Optional[int] = None
    assignee_default_id: Optional[str] = None
    due_date_rule: Optional[str] = None
    sla_days: Optional[int] = None
    status_suggestion: Optional[str] = None


class CreateWorkflowTemplateBody(Body):
    name: str
    category: Optional[str] = None
    jenis_pekerjaan: Optional[str] = None
    description: Optional[str] = None
    steps: list[CreateWorkflowTemplateStepBody]
