"""Domain types, models, and errors for the campaign backoffice."""

from backoffice.domain.errors import (
    ApiError,
    BackofficeError,
    ClientValidationError,
    EmptySelectionError,
    FeedbackRequiredError,
    InvalidDateError,
    InvalidTransitionError,
    WorkspaceRequiredError,
)
from backoffice.domain.models import (
    CampaignContent,
    CampaignContract,
    CampaignDetail,
    CampaignListItem,
    CampaignPayload,
    CampaignPhase,
    CampaignScript,
    CampaignUser,
    ChatMessage,
    DashboardResponse,
    Influencer,
    Notification,
    PhasePayload,
    User,
    Workspace,
)
from backoffice.domain.types import (
    ContentStatus,
    ContractStatus,
    ParticipantStatus,
    ScriptStatus,
    UserStatusAction,
)

__all__ = [
    "ApiError",
    "BackofficeError",
    "CampaignContent",
    "CampaignContract",
    "CampaignDetail",
    "CampaignListItem",
    "CampaignPayload",
    "CampaignPhase",
    "CampaignScript",
    "CampaignUser",
    "ChatMessage",
    "ClientValidationError",
    "ContentStatus",
    "ContractStatus",
    "DashboardResponse",
    "EmptySelectionError",
    "FeedbackRequiredError",
    "Influencer",
    "InvalidDateError",
    "InvalidTransitionError",
    "Notification",
    "ParticipantStatus",
    "PhasePayload",
    "ScriptStatus",
    "User",
    "UserStatusAction",
    "Workspace",
    "WorkspaceRequiredError",
]
