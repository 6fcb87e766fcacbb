"""Campaign creation pipeline.

Validates a campaign draft against the required fields and the date rules,
then creates the campaign, its phases, the banner and the mural listing in
that order.  Once the campaign exists, later failures are logged and
reported on the result; nothing already created is rolled back.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import structlog
from pydantic import BaseModel, Field

from backoffice.api import campaigns as campaigns_api
from backoffice.api import mural as mural_api
from backoffice.api import phases as phases_api
from backoffice.api.client import BackofficeClient
from backoffice.campaign.dates import (
    content_submission_deadline,
    validate_mural_end_date,
    validate_phase_one_date,
    validate_subsequent_phase_date,
)
from backoffice.domain.errors import BackofficeError, ClientValidationError, InvalidDateError
from backoffice.domain.models import CampaignDetail, CampaignPayload, CampaignPhase, PhasePayload

logger = structlog.get_logger()

REQUIRED_CAMPAIGN_FIELDS = ("title", "description", "objective")


class CampaignDraft(BaseModel):
    """Everything the creation form collects before saving."""

    campaign: CampaignPayload
    phases: list[PhasePayload] = Field(default_factory=list)
    banner: bytes | None = None
    banner_filename: str = "banner.jpg"
    banner_content_type: str = "image/jpeg"
    mural_end_date: str | None = None


class CreatedCampaign(BaseModel):
    """What the pipeline managed to create."""

    campaign: CampaignDetail
    phases: list[CampaignPhase] = Field(default_factory=list)
    banner_url: str | None = None
    mural_active: bool = False
    errors: list[str] = Field(default_factory=list)

    @property
    def complete(self) -> bool:
        """Return True when every step after campaign creation succeeded."""
        return not self.errors


@dataclass(frozen=True)
class FieldError:
    """A validation message attached to a form field path."""

    field: str
    message: str


def validate_draft(draft: CampaignDraft, today: date | None = None) -> list[FieldError]:
    """Collect every field error in *draft*.

    Checks the required campaign fields, that at least one phase exists, the
    phase one lead time, the gap between consecutive phases and the mural
    end date.

    Args:
        draft: The draft to check.
        today: Reference day for the date rules; defaults to the local date.

    Returns:
        The field errors, empty when the draft can be saved.
    """
    today = today or date.today()
    errors: list[FieldError] = []

    for name in REQUIRED_CAMPAIGN_FIELDS:
        value = getattr(draft.campaign, name)
        if value is None or not str(value).strip():
            errors.append(FieldError(name, f"{name.capitalize()} is required"))

    if not draft.phases:
        errors.append(FieldError("phases", "Add at least one phase"))

    previous: str | None = None
    for index, phase in enumerate(draft.phases):
        post_date = phase.post_date or ""
        if index == 0:
            check = validate_phase_one_date(post_date, today)
        else:
            check = validate_subsequent_phase_date(post_date, previous)
        if not check.valid and check.error:
            errors.append(FieldError(f"phases.{index}.post_date", check.error))
        previous = post_date or previous

    if draft.mural_end_date:
        phase_one_date = draft.phases[0].post_date if draft.phases else None
        check = validate_mural_end_date(draft.mural_end_date, phase_one_date, today)
        if not check.valid and check.error:
            errors.append(FieldError("mural_end_date", check.error))

    return errors


async def open_mural(
    client: BackofficeClient,
    campaign_id: str,
    end_date: str,
    phase_one_date: str | None,
    today: date | None = None,
) -> None:
    """Activate the mural after checking the end date against phase one.

    Raises:
        InvalidDateError: If the end date breaks the mural date rule.
        ApiError: If the API rejects the activation.
    """
    check = validate_mural_end_date(end_date, phase_one_date, today)
    if not check.valid:
        message = check.error or "Invalid mural end date"
        raise InvalidDateError(message, {"mural_end_date": message})
    await mural_api.activate_mural(client, campaign_id, end_date)


async def create_campaign_from_draft(
    client: BackofficeClient,
    draft: CampaignDraft,
    today: date | None = None,
) -> CreatedCampaign:
    """Validate and save a campaign draft.

    Phases without a content submission deadline get one derived from their
    post date.

    Args:
        client: API client with a workspace selected.
        draft: The draft to save.
        today: Reference day for the date rules; defaults to the local date.

    Returns:
        The created campaign with the outcome of each later step.

    Raises:
        ClientValidationError: If the draft has field errors; nothing is sent.
        ApiError: If the campaign itself cannot be created.
    """
    field_errors = validate_draft(draft, today)
    if field_errors:
        raise ClientValidationError(
            "Campaign draft has invalid fields",
            {error.field: error.message for error in field_errors},
        )

    campaign = await campaigns_api.create_campaign(client, draft.campaign)
    result = CreatedCampaign(campaign=campaign)
    logger.info("campaign_created", campaign_id=campaign.id, phases=len(draft.phases))

    for index, phase in enumerate(draft.phases, start=1):
        try:
            created = await phases_api.create_phase(client, campaign.id, phase)
        except BackofficeError as exc:
            logger.warning(
                "phase_creation_failed", campaign_id=campaign.id, phase=index, error=str(exc)
            )
            result.errors.append(f"Phase {index}: {exc}")
            continue
        if created.content_submission_deadline is None:
            created.content_submission_deadline = content_submission_deadline(created.post_date)
        result.phases.append(created)

    if draft.banner is not None:
        try:
            result.banner_url = await campaigns_api.upload_campaign_banner(
                client,
                campaign.id,
                draft.banner_filename,
                draft.banner,
                draft.banner_content_type,
            )
        except BackofficeError as exc:
            logger.warning("banner_upload_failed", campaign_id=campaign.id, error=str(exc))
            result.errors.append(f"Banner: {exc}")

    if draft.mural_end_date:
        try:
            await mural_api.activate_mural(client, campaign.id, draft.mural_end_date)
            result.mural_active = True
        except BackofficeError as exc:
            logger.warning("mural_activation_failed", campaign_id=campaign.id, error=str(exc))
            result.errors.append(f"Mural: {exc}")

    if result.errors:
        logger.warning(
            "campaign_created_with_errors", campaign_id=campaign.id, errors=len(result.errors)
        )
    return result
