"""Perkara / berkas akta and the dashboard aggregates built from them."""

from typing import Literal, Optional

from pydantic import BaseModel

from enotaris.models.base import Body, Record

CaseStatus = Literal["drafting", "signed", "registered", "closed"]
CaseCategory = Literal["notaris", "ppat"]


class CaseResponse(Record):
    id: str
    office_id: str
    category: CaseCategory
    nomor_draft: str = ""
    jenis_akta: str = ""
    nama_para_pihak: str = ""
    staf_penanggung_jawab_id: Optional[str] = None
    status: CaseStatus
    tanggal_mulai: Optional[str] = None
    target_selesai: Optional[str] = None
    nilai_transaksi: Optional[float] = None
    jenis_pekerjaan_ppat: Optional[str] = None
    luas_tanah_m2: Optional[float] = None
    luas_bangunan_m2: Optional[float] = None
    njop: Optional[float] = None
    nop: Optional[str] = None
    tahun_nop: Optional[str] = None
    created_at: str
    updated_at: str
    # Only present on list responses
    current_task_name: Optional[str] = None
    nama_klien: Optional[str] = None
    staf_penanggung_jawab_name: Optional[str] = None
    jenis_pekerjaan_singkatan: Optional[str] = None
    last_done_task_at: Optional[str] = None
    progress_percent: Optional[float] = None

    @property
    def title(self) -> str:
        return self.nama_para_pihak or self.nomor_draft or self.jenis_akta or "Berkas"


class ListCasesResult(Record):
    data: list[CaseResponse] = []
    total: int = 0


class CasePartyBody(BaseModel):
    client_id: str
    role: str


class CreateCaseBody(Body):
    category: Optional[CaseCategory] = None
    nomor_draft: Optional[str] = None
    jenis_akta: str
    nama_para_pihak: Optional[str] = None
    staf_penanggung_jawab_id: Optional[str] = None
    status: Optional[CaseStatus] = None
    tanggal_mulai: Optional[str] = None
    target_selesai: Optional[str] = None
    nilai_transaksi: Optional[float] = None
    parties: Optional[list[CasePartyBody]] = None
    task_names: Optional[list[str]] = None
    workflow_template_id: Optional[str] = None
    # PPAT
    jenis_pekerjaan_ppat: Optional[str] = None
    luas_tanah_m2: Optional[float] = None
    luas_bangunan_m2: Optional[float] = None
    njop: Optional[float] = None
    nop: Optional[str] = None
    tahun_nop: Optional[str] = None


class UpdateCaseBody(Body):
    category: Optional[CaseCategory] = None
    nomor_draft: Optional[str] = None
    jenis_akta: Optional[str] = None
    nama_para_pihak: Optional[str] = None
    staf_penanggung_jawab_id: Optional[str] = None
    status: Optional[CaseStatus] = None
    tanggal_mulai: Optional[str] = None
    target_selesai: Optional[str] = None
    nilai_transaksi: Optional[float] = None


class ApplyWorkflowTemplateBody(Body):
    workflow_template_id: str


class DashboardCaseCounts(Record):
    drafting: int = 0
    signed: int = 0
    registered: int = 0
    closed: int = 0
    closed_this_month: int = 0


class DashboardCaseTypeItem(Record):
    jenis_akta: str
    count: int


class DashboardTaskStats(Record):
    overdue: int = 0
    due_today: int = 0


class DashboardStats(Record):
    case_counts: DashboardCaseCounts
    cases_by_type: list[DashboardCaseTypeItem] = []
    tasks: DashboardTaskStats
    generated_at: str
