from enotaris.features.review.models import PendingReviewItem
from enotaris.features.review.service import get_pending_review_items

__all__ = ["PendingReviewItem", "get_pending_review_items"]
