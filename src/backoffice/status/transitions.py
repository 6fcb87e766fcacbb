"""Participant status transition tables and the transition guard.

Two adjacency tables exist.  ``INFLUENCER_TRANSITIONS`` covers the plain
invited-influencer lifecycle handled by the applications and curation
screens.  ``CAMPAIGN_USER_TRANSITIONS`` covers the full campaign-user
lifecycle shown on the management board, including the statuses the
platform sets on its own as content moves through review and payment.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from backoffice.domain.errors import InvalidTransitionError
from backoffice.domain.types import ParticipantStatus
from backoffice.status.normalization import normalize_status

S = ParticipantStatus

INFLUENCER_TRANSITIONS: dict[ParticipantStatus, frozenset[ParticipantStatus]] = {
    S.APPLICATIONS: frozenset({S.CURATION, S.REJECTED}),
    S.CURATION: frozenset({S.INVITED, S.APPROVED, S.REJECTED, S.APPLICATIONS}),
    S.INVITED: frozenset({S.APPROVED, S.REJECTED}),
    S.APPROVED: frozenset({S.REJECTED}),
    S.REJECTED: frozenset({S.CURATION}),
}

CAMPAIGN_USER_TRANSITIONS: dict[ParticipantStatus, frozenset[ParticipantStatus]] = {
    S.APPLICATIONS: frozenset({S.CURATION, S.REJECTED}),
    S.CURATION: frozenset({S.INVITED, S.REJECTED, S.APPLICATIONS}),
    S.INVITED: frozenset({S.CONTRACT_PENDING, S.APPROVED, S.REJECTED}),
    S.CONTRACT_PENDING: frozenset({S.APPROVED, S.REJECTED}),
    S.APPROVED: frozenset({S.SCRIPT_PENDING, S.CONTENT_PENDING, S.REJECTED}),
    S.SCRIPT_PENDING: frozenset({S.CONTENT_PENDING, S.REJECTED}),
    S.CONTENT_PENDING: frozenset({S.PENDING_APPROVAL, S.REJECTED}),
    S.PENDING_APPROVAL: frozenset({S.CONTENT_APPROVED, S.IN_CORRECTION}),
    S.IN_CORRECTION: frozenset({S.PENDING_APPROVAL}),
    S.CONTENT_APPROVED: frozenset({S.PAYMENT_PENDING}),
    S.PAYMENT_PENDING: frozenset({S.PUBLISHED}),
    S.PUBLISHED: frozenset(),
    S.REJECTED: frozenset({S.CURATION}),
}

# Set by the platform as content is submitted, reviewed, paid and published.
# Operators can never move a participant into one of these by hand.
AUTOMATIC_STATUSES: frozenset[ParticipantStatus] = frozenset(
    {
        S.PENDING_APPROVAL,
        S.IN_CORRECTION,
        S.CONTENT_APPROVED,
        S.PAYMENT_PENDING,
        S.PUBLISHED,
    }
)

TERMINAL_STATUSES: frozenset[ParticipantStatus] = frozenset({S.PUBLISHED})

STATUS_LABELS: dict[ParticipantStatus, str] = {
    S.APPLICATIONS: "Applications",
    S.CURATION: "In curation",
    S.INVITED: "Invited",
    S.CONTRACT_PENDING: "Contract pending",
    S.APPROVED: "Approved",
    S.SCRIPT_PENDING: "Script pending",
    S.CONTENT_PENDING: "Content pending",
    S.PENDING_APPROVAL: "Content awaiting approval",
    S.IN_CORRECTION: "In correction",
    S.CONTENT_APPROVED: "Content approved",
    S.PAYMENT_PENDING: "Payment pending",
    S.PUBLISHED: "Published",
    S.REJECTED: "Rejected",
}

TRANSITION_NOTES: dict[tuple[ParticipantStatus, ParticipantStatus], str] = {
    (S.APPLICATIONS, S.CURATION): "Application moved to curation",
    (S.APPLICATIONS, S.REJECTED): "Application rejected",
    (S.CURATION, S.INVITED): "Invitation sent after curation",
    (S.CURATION, S.APPROVED): "Approved during curation",
    (S.CURATION, S.REJECTED): "Rejected during curation",
    (S.CURATION, S.APPLICATIONS): "Returned to applications",
    (S.INVITED, S.CONTRACT_PENDING): "Invitation accepted, contract sent",
    (S.INVITED, S.APPROVED): "Invitation accepted",
    (S.INVITED, S.REJECTED): "Invitation withdrawn",
    (S.CONTRACT_PENDING, S.APPROVED): "Contract signed",
    (S.CONTRACT_PENDING, S.REJECTED): "Contract declined",
    (S.APPROVED, S.SCRIPT_PENDING): "Waiting for script submission",
    (S.APPROVED, S.CONTENT_PENDING): "Waiting for content submission",
    (S.APPROVED, S.REJECTED): "Removed from campaign",
    (S.SCRIPT_PENDING, S.CONTENT_PENDING): "Script approved, waiting for content",
    (S.SCRIPT_PENDING, S.REJECTED): "Removed from campaign",
    (S.CONTENT_PENDING, S.PENDING_APPROVAL): "Content submitted for approval",
    (S.CONTENT_PENDING, S.REJECTED): "Removed from campaign",
    (S.PENDING_APPROVAL, S.CONTENT_APPROVED): "Content approved",
    (S.PENDING_APPROVAL, S.IN_CORRECTION): "Content adjustments requested",
    (S.IN_CORRECTION, S.PENDING_APPROVAL): "Corrected content resubmitted",
    (S.CONTENT_APPROVED, S.PAYMENT_PENDING): "Waiting for payment",
    (S.PAYMENT_PENDING, S.PUBLISHED): "Payment completed, content published",
    (S.REJECTED, S.CURATION): "Reactivated for curation",
}


class TransitionDecision(BaseModel):
    """Outcome of checking a requested status transition."""

    model_config = ConfigDict(frozen=True)

    from_status: str
    to_status: str
    allowed: bool
    note: str
    reason: str | None = None


def _as_status(status: str | None) -> ParticipantStatus | None:
    try:
        return ParticipantStatus(normalize_status(status))
    except ValueError:
        return None


def status_label(status: str | None) -> str:
    """Return the human-readable label for *status*, or the raw value if unknown."""
    known = _as_status(status)
    if known is None:
        return str(status)
    return STATUS_LABELS[known]


def get_transition_note(from_status: str, to_status: str) -> str:
    """Return the audit note recorded for a ``from -> to`` move."""
    source, target = _as_status(from_status), _as_status(to_status)
    if source is not None and target is not None:
        note = TRANSITION_NOTES.get((source, target))
        if note is not None:
            return note
    return f"Status changed from {status_label(from_status)} to {status_label(to_status)}"


def _table(is_campaign_user: bool) -> dict[ParticipantStatus, frozenset[ParticipantStatus]]:
    return CAMPAIGN_USER_TRANSITIONS if is_campaign_user else INFLUENCER_TRANSITIONS


def validate_status_transition(from_status: str, to_status: str) -> bool:
    """Return True if the plain influencer lifecycle allows ``from -> to``.

    Both statuses are normalized first.  Unknown source statuses allow no
    moves and unknown targets are never allowed.
    """
    source, target = _as_status(from_status), _as_status(to_status)
    if source is None or target is None:
        return False
    return target in INFLUENCER_TRANSITIONS.get(source, frozenset())


def validate_user_status_transition(from_status: str, to_status: str) -> bool:
    """Return True if an operator may move a campaign user ``from -> to``.

    Automatic statuses are rejected whatever the source, since only the
    platform sets them.
    """
    source, target = _as_status(from_status), _as_status(to_status)
    if source is None or target is None:
        return False
    if target in AUTOMATIC_STATUSES:
        return False
    return target in CAMPAIGN_USER_TRANSITIONS.get(source, frozenset())


def is_transition_in_table(from_status: str, to_status: str, is_campaign_user: bool) -> bool:
    """Return True if ``from -> to`` is an edge of the table, ignoring who triggers it."""
    source, target = _as_status(from_status), _as_status(to_status)
    if source is None or target is None:
        return False
    return target in _table(is_campaign_user).get(source, frozenset())


def allowed_targets(
    from_status: str,
    is_campaign_user: bool,
    manual: bool = True,
) -> list[str]:
    """Return the sorted statuses reachable from *from_status*.

    Args:
        from_status: Current status, in any known spelling.
        is_campaign_user: Select the full campaign-user table.
        manual: Exclude automatic statuses (operator-initiated moves).
    """
    source = _as_status(from_status)
    if source is None:
        return []
    targets = _table(is_campaign_user).get(source, frozenset())
    if manual:
        targets = targets - AUTOMATIC_STATUSES
    return sorted(t.value for t in targets)


def check_transition(
    from_status: str,
    to_status: str,
    is_campaign_user: bool,
) -> TransitionDecision:
    """Decide whether an operator may move a participant and describe the move.

    Args:
        from_status: Current status, in any known spelling.
        to_status: Requested status, in any known spelling.
        is_campaign_user: Use the campaign-user table instead of the
            influencer table.

    Returns:
        A ``TransitionDecision`` with the normalized statuses, the verdict,
        the audit note, and a denial reason naming both status labels.
    """
    source = normalize_status(from_status)
    target = normalize_status(to_status)

    if is_campaign_user:
        allowed = validate_user_status_transition(source, target)
    else:
        allowed = validate_status_transition(source, target)

    reason = None
    if not allowed:
        reason = (
            f"Cannot move from \"{status_label(source)}\" to \"{status_label(target)}\""
        )
        if _as_status(target) in AUTOMATIC_STATUSES:
            reason += " (status is set automatically)"

    return TransitionDecision(
        from_status=source,
        to_status=target,
        allowed=allowed,
        note=get_transition_note(source, target),
        reason=reason,
    )


def require_transition(
    from_status: str,
    to_status: str,
    is_campaign_user: bool,
) -> TransitionDecision:
    """Like ``check_transition`` but raise when the move is denied.

    Raises:
        InvalidTransitionError: If the transition is not permitted.
    """
    decision = check_transition(from_status, to_status, is_campaign_user)
    if not decision.allowed:
        raise InvalidTransitionError(decision.from_status, decision.to_status, decision.reason)
    return decision
