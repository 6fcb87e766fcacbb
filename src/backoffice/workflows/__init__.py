"""Operator workflows built on the API service layer."""

from backoffice.workflows.bulk import (
    BulkResult,
    bulk_move_to_curation,
    bulk_review_contents,
    bulk_review_influencers,
    bulk_review_scripts,
    bulk_update_status,
)
from backoffice.workflows.chat import ChatSession
from backoffice.workflows.status_change import change_participant_status

__all__ = [
    "BulkResult",
    "ChatSession",
    "bulk_move_to_curation",
    "bulk_review_contents",
    "bulk_review_influencers",
    "bulk_review_scripts",
    "bulk_update_status",
    "change_participant_status",
]
