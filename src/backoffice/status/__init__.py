"""Participant status normalization, transition guard, and lifecycle machine."""

from backoffice.status.machine import ParticipantStatusMachine
from backoffice.status.normalization import STATUS_ALIASES, is_known_status, normalize_status
from backoffice.status.transitions import (
    AUTOMATIC_STATUSES,
    CAMPAIGN_USER_TRANSITIONS,
    INFLUENCER_TRANSITIONS,
    STATUS_LABELS,
    TERMINAL_STATUSES,
    TRANSITION_NOTES,
    TransitionDecision,
    allowed_targets,
    check_transition,
    get_transition_note,
    require_transition,
    status_label,
    validate_status_transition,
    validate_user_status_transition,
)

__all__ = [
    "AUTOMATIC_STATUSES",
    "CAMPAIGN_USER_TRANSITIONS",
    "INFLUENCER_TRANSITIONS",
    "STATUS_ALIASES",
    "STATUS_LABELS",
    "TERMINAL_STATUSES",
    "TRANSITION_NOTES",
    "ParticipantStatusMachine",
    "TransitionDecision",
    "allowed_targets",
    "check_transition",
    "get_transition_note",
    "is_known_status",
    "normalize_status",
    "require_transition",
    "status_label",
    "validate_status_transition",
    "validate_user_status_transition",
]
