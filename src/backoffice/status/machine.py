"""ParticipantStatusMachine class with move_to, history, and valid targets."""

from __future__ import annotations

from backoffice.domain.errors import InvalidTransitionError
from backoffice.domain.types import ParticipantStatus
from backoffice.status.normalization import normalize_status
from backoffice.status.transitions import (
    AUTOMATIC_STATUSES,
    TERMINAL_STATUSES,
    allowed_targets,
    check_transition,
    get_transition_note,
    is_transition_in_table,
)

HistoryEntry = tuple[str, str, str]

# Forward path walked by derive_history, per lifecycle.
_CAMPAIGN_USER_PATH: list[ParticipantStatus] = [
    ParticipantStatus.APPLICATIONS,
    ParticipantStatus.CURATION,
    ParticipantStatus.INVITED,
    ParticipantStatus.CONTRACT_PENDING,
    ParticipantStatus.APPROVED,
    ParticipantStatus.SCRIPT_PENDING,
    ParticipantStatus.CONTENT_PENDING,
    ParticipantStatus.PENDING_APPROVAL,
    ParticipantStatus.CONTENT_APPROVED,
    ParticipantStatus.PAYMENT_PENDING,
    ParticipantStatus.PUBLISHED,
]

_INFLUENCER_PATH: list[ParticipantStatus] = [
    ParticipantStatus.APPLICATIONS,
    ParticipantStatus.CURATION,
    ParticipantStatus.INVITED,
    ParticipantStatus.APPROVED,
]


class ParticipantStatusMachine:
    """State machine for one campaign participant's status.

    Tracks the current status, validates moves against the transition
    tables, and keeps an in-memory history of every applied move.  The
    history is not persisted anywhere.

    Usage::

        sm = ParticipantStatusMachine("curadoria", is_campaign_user=True)
        sm.move_to("invited")                    # operator action
        sm.move_to("contract_pending")
        sm.move_to("approved")
    """

    def __init__(
        self,
        status: str | None = ParticipantStatus.APPLICATIONS,
        is_campaign_user: bool = True,
    ) -> None:
        self._status: str = normalize_status(status)
        self._is_campaign_user = is_campaign_user
        self._history: list[HistoryEntry] = []

    @classmethod
    def from_snapshot(
        cls,
        status: str,
        history: list[HistoryEntry],
        is_campaign_user: bool = True,
    ) -> ParticipantStatusMachine:
        """Reconstruct a machine at *status* with *history* already recorded.

        Args:
            status: The status to restore.
            history: ``(from, note, to)`` tuples in chronological order.
            is_campaign_user: Which transition table applies.
        """
        instance = cls(status=status, is_campaign_user=is_campaign_user)
        instance._history = list(history)
        return instance

    @classmethod
    def derive_history(
        cls,
        status: str | None,
        is_campaign_user: bool = True,
    ) -> ParticipantStatusMachine:
        """Build a machine whose history is inferred from the current status.

        The API only reports the current status, so the history shown to the
        operator is the forward path from ``applications`` to it.  Rejected
        and in-correction participants get the path to the status they most
        plausibly left from.  Unknown statuses get an empty history.
        """
        current = normalize_status(status)
        path = _CAMPAIGN_USER_PATH if is_campaign_user else _INFLUENCER_PATH
        steps = [s.value for s in path]

        if current == ParticipantStatus.REJECTED:
            chain = [ParticipantStatus.APPLICATIONS.value, current]
        elif current == ParticipantStatus.IN_CORRECTION and is_campaign_user:
            end = steps.index(ParticipantStatus.PENDING_APPROVAL.value)
            chain = [*steps[: end + 1], current]
        elif current in steps:
            chain = steps[: steps.index(current) + 1]
        else:
            chain = [current]

        history = [
            (source, get_transition_note(source, target), target)
            for source, target in zip(chain, chain[1:], strict=False)
        ]
        return cls.from_snapshot(current, history, is_campaign_user=is_campaign_user)

    @property
    def status(self) -> str:
        """Return the current (normalized) status."""
        return self._status

    @property
    def is_campaign_user(self) -> bool:
        """Return True if the full campaign-user table applies."""
        return self._is_campaign_user

    @property
    def is_terminal(self) -> bool:
        """Return True if no further moves are possible."""
        return self._status in TERMINAL_STATUSES or not allowed_targets(
            self._status, self._is_campaign_user, manual=False
        )

    @property
    def history(self) -> list[HistoryEntry]:
        """Return a copy of the ``(from, note, to)`` history in chronological order."""
        return list(self._history)

    def move_to(self, target: str, manual: bool = True) -> str:
        """Move to *target* and record the move.

        Args:
            target: Requested status in any known spelling.
            manual: True for operator actions, which may never reach an
                automatic status.  False for platform-driven moves, which
                only need to follow the table.

        Returns:
            The new normalized status.

        Raises:
            InvalidTransitionError: If the move is not allowed.
        """
        if manual:
            decision = check_transition(self._status, target, self._is_campaign_user)
            if not decision.allowed:
                raise InvalidTransitionError(
                    decision.from_status, decision.to_status, decision.reason
                )
            new_status, note = decision.to_status, decision.note
        else:
            new_status = normalize_status(target)
            if not is_transition_in_table(self._status, new_status, self._is_campaign_user):
                raise InvalidTransitionError(self._status, new_status)
            note = get_transition_note(self._status, new_status)

        self._history.append((self._status, note, new_status))
        self._status = new_status
        return new_status

    def get_valid_targets(self, manual: bool = True) -> list[str]:
        """Return the sorted statuses reachable from the current one."""
        return allowed_targets(self._status, self._is_campaign_user, manual=manual)

    def is_automatic(self) -> bool:
        """Return True if the current status is one the platform sets itself."""
        return self._status in AUTOMATIC_STATUSES
