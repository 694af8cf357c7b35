from pydantic import BaseModel

from enotaris.models.case import CaseResponse
from enotaris.models.document import CaseDocumentEntryItem


class PendingReviewItem(BaseModel):
    """An uploaded document awaiting the notaris' verification, with its case."""

    entry: CaseDocumentEntryItem
    case: CaseResponse

    @property
    def doc_label(self) -> str:
        return self.entry.item_label or self.entry.item_key

    @property
    def case_url(self) -> str:
        return f"/cases/{self.case.id}?tab=dokumen"
