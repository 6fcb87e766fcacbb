"""Campaign creation: scheduling rules and the save pipeline."""

from backoffice.campaign.dates import (
    CONTENT_SUBMISSION_LEAD_DAYS,
    MURAL_PHASE_MARGIN_DAYS,
    PHASE_GAP_DAYS,
    PHASE_ONE_LEAD_DAYS,
    DateCheck,
    content_submission_deadline,
    format_display_date,
    parse_display_date,
    validate_mural_end_date,
    validate_phase_one_date,
    validate_subsequent_phase_date,
)
from backoffice.campaign.wizard import (
    CampaignDraft,
    CreatedCampaign,
    FieldError,
    create_campaign_from_draft,
    validate_draft,
)

__all__ = [
    "CONTENT_SUBMISSION_LEAD_DAYS",
    "MURAL_PHASE_MARGIN_DAYS",
    "PHASE_GAP_DAYS",
    "PHASE_ONE_LEAD_DAYS",
    "CampaignDraft",
    "CreatedCampaign",
    "DateCheck",
    "FieldError",
    "content_submission_deadline",
    "create_campaign_from_draft",
    "format_display_date",
    "parse_display_date",
    "validate_draft",
    "validate_mural_end_date",
    "validate_phase_one_date",
    "validate_subsequent_phase_date",
]
