"""Indonesian display labels for backend enum values."""

from typing import Optional

TASK_STATUS_LABELS = {
    "todo": "Belum",
    "in_progress": "Proses",
    "done": "Selesai",
    "blocked": "Terhambat",
    "waiting": "Menunggu task sebelumnya",
}

CASE_STATUS_LABELS = {
    "drafting": "Drafting",
    "signed": "Tanda tangan",
    "registered": "Terdaftar",
    "closed": "Arsip",
}

EVENT_TYPE_LABELS = {
    "plotting": "Plotting tanah",
    "tanda_tangan_akad": "Tanda tangan akad",
    "batas_pajak": "Batas pajak",
    "lainnya": "Lainnya",
}

CLIENT_TYPE_LABELS = {
    "individual": "Perorangan",
    "entity": "Badan Hukum",
}

# Case statuses that may have a repertorium (protocol) entry
PROTOCOL_STATUSES = ("registered", "closed")


def label_for(table: dict, value: Optional[str]) -> str:
    """Label for ``value``, or the raw value when unknown."""
    if not value:
        return ""
    return table.get(value, value)
