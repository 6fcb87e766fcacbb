"""Domain enumerations for the campaign backoffice."""

from enum import StrEnum


class ParticipantStatus(StrEnum):
    """Lifecycle states of an influencer taking part in a campaign."""

    APPLICATIONS = "applications"
    CURATION = "curation"
    INVITED = "invited"
    CONTRACT_PENDING = "contract_pending"
    APPROVED = "approved"
    SCRIPT_PENDING = "script_pending"
    CONTENT_PENDING = "content_pending"
    PENDING_APPROVAL = "pending_approval"
    IN_CORRECTION = "in_correction"
    CONTENT_APPROVED = "content_approved"
    PAYMENT_PENDING = "payment_pending"
    PUBLISHED = "published"
    REJECTED = "rejected"


class ContentStatus(StrEnum):
    """Review states of a submitted piece of content."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    ADJUSTMENT_REQUESTED = "adjustment_requested"
    PUBLISHED = "published"


class ScriptStatus(StrEnum):
    """Review states of a submitted script."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ContractStatus(StrEnum):
    """States of a contract sent to an influencer."""

    PENDING = "pending"
    SENT = "sent"
    VIEWED = "viewed"
    SIGNED = "signed"
    REJECTED = "rejected"
    EXPIRED = "expired"


class UserStatusAction(StrEnum):
    """Manual actions accepted by the campaign users endpoint."""

    APPROVED = "approved"
    CURATION = "curation"
    REJECTED = "rejected"
    APPLICATIONS = "applications"


class PaymentMethod(StrEnum):
    """Known campaign payment methods."""

    FIXED = "fixed"
    PRICE = "price"
    SWAP = "swap"
    CPA = "cpa"
    CPM = "cpm"
    OTHER = "other"


class NotificationType(StrEnum):
    """Kinds of backoffice notifications."""

    CONTENT_APPROVED = "content_approved"
    CONTENT_ADJUSTMENT_REQUESTED = "content_adjustment_requested"
    CONTENT_SUBMITTED = "content_submitted"
    NEW_CONTENT_SUBMISSION = "new_content_submission"
    NEW_MESSAGE = "new_message"
