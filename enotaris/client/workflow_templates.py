from typing import Optional

from enotaris.client.http import ApiClient, parse_model, request_json, request_list
from enotaris.models.workflow_template import CreateWorkflowTemplateBody, WorkflowTemplateItem


async def get_workflow_templates(
    api: ApiClient,
    token: Optional[str],
    *,
    category: Optional[str] = None,
    jenis_pekerjaan: Optional[str] = None,
) -> list[WorkflowTemplateItem]:
    return await request_list(
        api,
        WorkflowTemplateItem,
        "/api/v1/workflow-templates",
        token=token,
        params={"category": category, "jenis_pekerjaan": jenis_pekerjaan},
        fallback="Gagal memuat template workflow",
    )


async def create_workflow_template(
    api: ApiClient, token: Optional[str], body: CreateWorkflowTemplateBody
) -> WorkflowTemplateItem:
    fallback = "Gagal membuat template workflow"
    data = await request_json(
        api, "POST", "/api/v1/workflow-templates", token=token, json=body.to_json(), fallback=fallback
    )
    return parse_model(WorkflowTemplateItem, data, fallback)
