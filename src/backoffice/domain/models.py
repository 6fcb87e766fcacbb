"""Pydantic v2 models for backoffice API records and request payloads.

Records mirror API responses.  The API has sent several fields in both
snake_case and camelCase over time, so those fields accept either spelling.
Numeric ids are coerced to strings, unknown fields are ignored, and
participant statuses are normalized on the way in.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from backoffice.status.normalization import normalize_status


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def either(name: str, *extra: str) -> AliasChoices:
    """Accept *name* in snake_case, its camelCase form, and any *extra* aliases."""
    return AliasChoices(name, _camel(name), *extra)


class ApiRecord(BaseModel):
    """Base for all records parsed from API responses."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


# ---------------------------------------------------------------------------
# Account and workspace
# ---------------------------------------------------------------------------


class User(ApiRecord):
    """The authenticated backoffice user."""

    id: str
    name: str
    email: str
    phone: str | None = None
    email_verified_at: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class Workspace(ApiRecord):
    """A brand workspace grouping campaigns."""

    id: str
    name: str
    photo: str | None = None


class Niche(ApiRecord):
    """A content niche; sub-niches point at their parent."""

    id: int
    name: str
    parent_id: int | None = None


# ---------------------------------------------------------------------------
# Campaigns and phases
# ---------------------------------------------------------------------------


class PaymentValue(ApiRecord):
    """Payment terms offered to influencers."""

    amount: float | None = None
    currency: str | None = None
    description: str | None = None


class CampaignListItem(ApiRecord):
    """A campaign as returned by the list endpoint."""

    id: str
    title: str
    description: str = ""
    status: str = ""
    max_influencers: int = 0
    banner: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class CampaignDetail(ApiRecord):
    """Full campaign detail."""

    id: str
    title: str
    description: str = ""
    objective: str = ""
    public_id: str | None = None
    workspace_id: str | None = None
    niche_id: int | None = None
    secondary_niches: list[Niche] = Field(default_factory=list)
    max_influencers: int = 0
    payment_method: str | None = None
    payment_method_label: str | None = None
    payment_method_details: PaymentValue | None = Field(
        default=None, validation_alias=either("payment_method_details", "payment_value")
    )
    benefits: str | None = None
    rules_does: str | None = None
    rules_does_not: str | None = None
    segment_min_followers: int | None = None
    segment_state: str | None = None
    segment_city: str | None = None
    segment_genders: list[str] = Field(default_factory=list)
    image_rights_period: int | None = None
    banner: str | None = None
    status: str = ""
    created_at: str | None = None
    updated_at: str | None = None


class FormatOption(ApiRecord):
    """One deliverable inside a phase format (e.g. 2 stories)."""

    type: str
    quantity: int = 1


class PhaseFormat(ApiRecord):
    """Deliverables required on one social network in a phase."""

    type: str
    options: list[FormatOption] = Field(default_factory=list)


class CampaignPhase(ApiRecord):
    """A time-boxed stage of a campaign."""

    id: str
    order: int | None = None
    objective: str = ""
    post_date: str | None = Field(
        default=None, validation_alias=either("post_date", "publish_date")
    )
    publish_time: str | None = None
    content_submission_deadline: str | None = None
    correction_submission_deadline: str | None = None
    formats: list[PhaseFormat] = Field(
        default_factory=list, validation_alias=either("formats", "contents")
    )
    files: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Participants
# ---------------------------------------------------------------------------


class Participant(ApiRecord):
    """Common fields of an influencer taking part in a campaign."""

    id: str
    user_id: str | None = Field(default=None, validation_alias=either("user_id"))
    name: str
    username: str = ""
    avatar: str | None = None
    followers: int = 0
    engagement: float = 0.0
    niche: str | None = None
    status: str = "applications"

    @field_validator("status", mode="before")
    @classmethod
    def canonical_status(cls, v: object) -> object:
        """Normalize legacy and Portuguese status spellings."""
        if v is None or isinstance(v, str):
            return normalize_status(v)
        return v


class Influencer(Participant):
    """An influencer on the campaign's applications, curation or management lists."""

    social_network: str | None = Field(default=None, validation_alias=either("social_network"))
    phase: str | None = None
    recommendation_reason: str | None = Field(
        default=None, validation_alias=either("recommendation_reason")
    )


class CampaignUser(Participant):
    """A row of the campaign_users table.

    ``id`` is the campaign user id (used for status updates and chat rooms);
    ``user_id`` is the influencer's own user id.
    """


class StatusHistoryEntry(ApiRecord):
    """One recorded status change of an influencer."""

    id: str
    status: str
    timestamp: str
    notes: str | None = None

    @field_validator("status", mode="before")
    @classmethod
    def canonical_status(cls, v: object) -> object:
        """Normalize legacy and Portuguese status spellings."""
        if v is None or isinstance(v, str):
            return normalize_status(v)
        return v



# ---------------------------------------------------------------------------
# Catalog and influencer lists
# ---------------------------------------------------------------------------


class CatalogInfluencer(ApiRecord):
    """An influencer from the workspace catalog, not yet tied to a campaign."""

    id: str
    name: str
    username: str = ""
    avatar: str | None = Field(default=None, validation_alias=either("avatar", "photo"))
    followers: int = 0
    engagement: float = 0.0
    niche: str | None = None
    social_network: str | None = Field(default=None, validation_alias=either("social_network"))
    gender: str | None = None
    age_range: str | None = Field(default=None, validation_alias=either("age_range"))
    country: str | None = None
    state: str | None = None
    city: str | None = None


class RecommendedInfluencer(ApiRecord):
    id: str
    name: str
    avatar: str | None = None


class Recommendation(ApiRecord):
    """An influencer suggested for a campaign, with the reason shown to the brand."""

    influencer: RecommendedInfluencer
    reason: str = ""


class InfluencerList(ApiRecord):
    """A saved list of influencers in the workspace."""

    id: str
    name: str
    created_at: str | None = Field(default=None, validation_alias=either("created_at"))
    influencer_count: int = Field(default=0, validation_alias=either("influencer_count"))


class InfluencerListMember(ApiRecord):
    id: str
    name: str
    email: str = ""
    photo: str | None = None


class InfluencerListDetail(ApiRecord):
    """A saved list with its members."""

    id: str
    name: str
    influencers: list[InfluencerListMember] = Field(default_factory=list)
    created_at: str | None = Field(default=None, validation_alias=either("created_at"))


# ---------------------------------------------------------------------------
# Contents, scripts and contracts
# ---------------------------------------------------------------------------


class CampaignContent(ApiRecord):
    """A piece of content submitted by an influencer."""

    id: str
    campaign_id: str | None = Field(default=None, validation_alias=either("campaign_id"))
    influencer_id: str | None = Field(default=None, validation_alias=either("influencer_id"))
    influencer_name: str | None = Field(default=None, validation_alias=either("influencer_name"))
    influencer_avatar: str | None = Field(
        default=None, validation_alias=either("influencer_avatar")
    )
    social_network: str | None = Field(default=None, validation_alias=either("social_network"))
    content_type: str | None = Field(default=None, validation_alias=either("content_type"))
    preview_url: str | None = Field(default=None, validation_alias=either("preview_url"))
    post_url: str | None = Field(default=None, validation_alias=either("post_url"))
    caption: str | None = None
    status: str = "pending"
    phase_id: str | None = Field(default=None, validation_alias=either("phase_id"))
    submitted_at: str | None = Field(default=None, validation_alias=either("submitted_at"))
    published_at: str | None = Field(default=None, validation_alias=either("published_at"))
    feedback: str | None = None
    ai_evaluation: dict[str, Any] | None = Field(
        default=None, validation_alias=either("ai_evaluation")
    )


class EvaluationCriteria(ApiRecord):
    """Per-criterion scores of an automated content evaluation."""

    relevance: float = 0.0
    quality: float = 0.0
    engagement: float = 0.0


class ContentEvaluation(ApiRecord):
    """Automated evaluation of a content submission."""

    score: float
    criteria: EvaluationCriteria = Field(default_factory=EvaluationCriteria)
    recommendations: list[str] = Field(default_factory=list)


class CampaignScript(ApiRecord):
    """A script submitted by an influencer before producing content."""

    id: str
    campaign_id: str | None = Field(default=None, validation_alias=either("campaign_id"))
    influencer_id: str | None = Field(default=None, validation_alias=either("influencer_id"))
    influencer_name: str | None = Field(default=None, validation_alias=either("influencer_name"))
    influencer_avatar: str | None = Field(
        default=None, validation_alias=either("influencer_avatar")
    )
    social_network: str | None = Field(default=None, validation_alias=either("social_network"))
    phase_id: str | None = Field(default=None, validation_alias=either("phase_id"))
    script_text: str | None = Field(default=None, validation_alias=either("script_text", "script"))
    file_url: str | None = Field(default=None, validation_alias=either("file_url"))
    status: str = "pending"
    feedback: str | None = None
    submitted_at: str | None = Field(default=None, validation_alias=either("submitted_at"))
    approved_at: str | None = Field(default=None, validation_alias=either("approved_at"))


class CampaignContract(ApiRecord):
    """A contract sent to an influencer for signature."""

    id: str
    campaign_id: str | None = Field(default=None, validation_alias=either("campaign_id"))
    influencer_id: str | None = Field(default=None, validation_alias=either("influencer_id"))
    influencer_name: str | None = Field(default=None, validation_alias=either("influencer_name"))
    influencer_avatar: str | None = Field(
        default=None, validation_alias=either("influencer_avatar")
    )
    template_id: str | None = Field(default=None, validation_alias=either("template_id"))
    status: str = "pending"
    contract_url: str | None = Field(default=None, validation_alias=either("contract_url"))
    sent_at: str | None = Field(default=None, validation_alias=either("sent_at"))
    viewed_at: str | None = Field(default=None, validation_alias=either("viewed_at"))
    signed_at: str | None = Field(default=None, validation_alias=either("signed_at"))
    expires_at: str | None = Field(default=None, validation_alias=either("expires_at"))
    rejection_reason: str | None = Field(
        default=None, validation_alias=either("rejection_reason")
    )


class ContractTemplate(ApiRecord):
    """A reusable contract template."""

    id: str
    name: str
    content: str = ""
    created_at: str | None = None
    updated_at: str | None = None


# ---------------------------------------------------------------------------
# Chat and notifications
# ---------------------------------------------------------------------------


class ChatMessage(ApiRecord):
    """One message exchanged between the brand and an influencer."""

    id: str
    sender_id: str = Field(validation_alias=either("sender_id"))
    message: str = Field(default="", validation_alias=either("message", "content"))
    attachments: list[str] = Field(default_factory=list)
    created_at: str | None = Field(default=None, validation_alias=either("created_at"))
    read_at: str | None = Field(default=None, validation_alias=either("read_at"))


class Notification(ApiRecord):
    """A backoffice notification."""

    id: str
    type: str
    title: str = ""
    message: str = ""
    bold_text: str | None = Field(default=None, validation_alias=either("bold_text"))
    created_at: str | None = None
    read_at: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_read(self) -> bool:
        """Return True once the notification has been marked as read."""
        return self.read_at is not None


# ---------------------------------------------------------------------------
# Metrics and dashboard
# ---------------------------------------------------------------------------


class CampaignMetrics(ApiRecord):
    """Aggregate campaign performance."""

    reach: int = 0
    engagement: float = 0.0
    published_content: int = 0
    active_influencers: int = 0
    conversion_rate: float | None = None


class InfluencerMetrics(ApiRecord):
    """Performance totals for one influencer in a campaign."""

    influencer_id: str
    influencer_name: str = ""
    influencer_avatar: str | None = None
    total_views: int = 0
    total_likes: int = 0
    total_comments: int = 0
    total_shares: int = 0
    total_reach: int = 0
    average_engagement: float = 0.0
    contents_count: int = 0


class ContentMetrics(ApiRecord):
    """Performance of one published content."""

    content_id: str | None = None
    views: int = 0
    likes: int = 0
    comments: int = 0
    shares: int = 0
    reach: int = 0
    engagement_rate: float = 0.0


class IdentifiedPost(ApiRecord):
    """A post found automatically through the phase hashtags."""

    id: str
    influencer_id: str | None = Field(default=None, validation_alias=either("influencer_id"))
    influencer_name: str | None = Field(default=None, validation_alias=either("influencer_name"))
    social_network: str | None = Field(default=None, validation_alias=either("social_network"))
    post_url: str | None = Field(default=None, validation_alias=either("post_url"))
    phase_id: str | None = Field(default=None, validation_alias=either("phase_id"))
    published_at: str | None = Field(default=None, validation_alias=either("published_at"))


class DashboardResponse(ApiRecord):
    """Everything the campaign dashboard needs in one call."""

    phases: list[CampaignPhase] = Field(default_factory=list)
    influencers: list[Influencer] = Field(default_factory=list)
    contents: list[CampaignContent] = Field(default_factory=list)
    metrics: CampaignMetrics = Field(default_factory=CampaignMetrics)


class MuralStatus(ApiRecord):
    """Whether the campaign is open for public applications."""

    active: bool = False
    end_date: str | None = None


# ---------------------------------------------------------------------------
# Request payloads
# ---------------------------------------------------------------------------


class CampaignPayload(BaseModel):
    """Body for creating or updating a campaign.

    Every field is optional so the same model serves partial updates; the
    creation pipeline checks the fields a new campaign needs.
    """

    title: str | None = None
    description: str | None = None
    objective: str | None = None
    secondary_niches: list[Niche] | None = None
    max_influencers: int | None = None
    payment_method: str | None = None
    payment_method_details: PaymentValue | None = None
    benefits: str | None = None
    rules_does: str | None = None
    rules_does_not: str | None = None
    segment_min_followers: int | None = None
    segment_state: str | None = None
    segment_city: str | None = None
    segment_genders: list[str] | None = None
    image_rights_period: int | None = None

    def to_body(self) -> dict[str, Any]:
        """Serialize for the API, omitting unset members."""
        return self.model_dump(exclude_none=True)


class PhasePayload(BaseModel):
    """Body for creating or updating a campaign phase."""

    objective: str | None = None
    post_date: str | None = None
    formats: list[PhaseFormat] | None = None
    files: list[str] | None = None

    def to_body(self) -> dict[str, Any]:
        """Serialize for the API, omitting unset members."""
        return self.model_dump(exclude_none=True)


class CatalogFilters(BaseModel):
    """Search filters for the influencer catalog; unset filters are not sent."""

    social_network: str | None = None
    age_range: str | None = None
    gender: str | None = None
    followers_min: int | None = None
    followers_max: int | None = None
    niche: str | None = None
    country: str | None = None
    state: str | None = None
    city: str | None = None

    def to_params(self) -> dict[str, Any]:
        """Serialize as query parameters, omitting unset filters."""
        return self.model_dump(exclude_none=True)
