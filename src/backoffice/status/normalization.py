"""Canonical participant status normalization.

The API has returned participant statuses under several vocabularies over
time: the current English enum, legacy English names used by older
frontends, and Portuguese labels.  ``STATUS_ALIASES`` is the single table
mapping every known spelling to one ``ParticipantStatus``.
"""

from __future__ import annotations

from backoffice.domain.types import ParticipantStatus

STATUS_ALIASES: dict[str, ParticipantStatus] = {
    # Canonical values map to themselves
    **{status.value: status for status in ParticipantStatus},
    # Legacy English
    "inscriptions": ParticipantStatus.APPLICATIONS,
    "selected": ParticipantStatus.APPLICATIONS,
    "approved_progress": ParticipantStatus.APPROVED,
    "active": ParticipantStatus.APPROVED,
    "awaiting_approval": ParticipantStatus.PENDING_APPROVAL,
    # Portuguese
    "inscricoes": ParticipantStatus.APPLICATIONS,
    "curadoria": ParticipantStatus.CURATION,
    "convidado": ParticipantStatus.INVITED,
    "convidados": ParticipantStatus.INVITED,
    "contrato_pendente": ParticipantStatus.CONTRACT_PENDING,
    "aprovado": ParticipantStatus.APPROVED,
    "aprovados": ParticipantStatus.APPROVED,
    "roteiro_pendente": ParticipantStatus.SCRIPT_PENDING,
    "conteudo_pendente": ParticipantStatus.CONTENT_PENDING,
    "conteudo_submetido": ParticipantStatus.PENDING_APPROVAL,
    "aguardando_aprovacao": ParticipantStatus.PENDING_APPROVAL,
    "conteudo_rejeitado": ParticipantStatus.IN_CORRECTION,
    "em_correcao": ParticipantStatus.IN_CORRECTION,
    "conteudo_aprovado": ParticipantStatus.CONTENT_APPROVED,
    "pagamento_pendente": ParticipantStatus.PAYMENT_PENDING,
    "publicado": ParticipantStatus.PUBLISHED,
    "recusado": ParticipantStatus.REJECTED,
    "rejeitado": ParticipantStatus.REJECTED,
    "rejeitados": ParticipantStatus.REJECTED,
}


def _alias_key(status: str) -> str:
    return status.strip().lower().replace("-", "_").replace(" ", "_")


def normalize_status(status: str | None) -> str:
    """Map any known status spelling to its canonical English value.

    A missing or blank status means the participant has only applied, so it
    normalizes to ``applications``.  Unknown values are returned unchanged so
    callers can still display them; the transition tables treat them as
    having no allowed moves.

    Args:
        status: The raw status string from the API, or ``None``.

    Returns:
        The canonical status value, or *status* itself when it is unknown.
    """
    if status is None or not status.strip():
        return ParticipantStatus.APPLICATIONS.value

    canonical = STATUS_ALIASES.get(_alias_key(status))
    if canonical is None:
        return status
    return canonical.value


def is_known_status(status: str | None) -> bool:
    """Return True if *status* normalizes to a canonical ``ParticipantStatus``."""
    return normalize_status(status) in STATUS_ALIASES
