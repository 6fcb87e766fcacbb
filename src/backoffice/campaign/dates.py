"""Date rules for campaign phases and the public mural.

Form fields carry ISO ``YYYY-MM-DD`` strings and operators type dates as
``DD/MM/YYYY``.  An empty field is always valid; the creation pipeline
decides which fields are required.  All comparisons are on calendar days.
"""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, timedelta

# Phase one must start at least this many days after today
PHASE_ONE_LEAD_DAYS = 10

# Each later phase must start at least this many days after the previous one
PHASE_GAP_DAYS = 3

# Reported distance between the mural end date and phase one
MURAL_PHASE_MARGIN_DAYS = 7

# Influencers submit content this many days before the phase date
CONTENT_SUBMISSION_LEAD_DAYS = 4

# Corrected content is due this many days before the phase date
CORRECTION_SUBMISSION_LEAD_DAYS = 1

_NON_DIGITS = re.compile(r"\D")

INVALID_DATE_MESSAGE = "Invalid date"


@dataclass(frozen=True)
class DateCheck:
    """Outcome of a date rule, with the bounds shown next to the field."""

    valid: bool
    error: str | None = None
    min_date: str | None = None
    max_date: str | None = None


def _parse_iso(value: str) -> date | None:
    """Return the calendar day of an ISO date or datetime, or None if malformed."""
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def _display(day: date) -> str:
    return day.strftime("%d/%m/%Y")


def phase_one_min_date(today: date | None = None) -> str:
    """Return the earliest allowed phase one date as ISO."""
    today = today or date.today()
    return (today + timedelta(days=PHASE_ONE_LEAD_DAYS)).isoformat()


def validate_phase_one_date(value: str, today: date | None = None) -> DateCheck:
    """Check that phase one starts at least ten days from *today*.

    Args:
        value: Selected date as ISO, or empty.
        today: Reference day; defaults to the local date.

    Returns:
        A ``DateCheck`` whose ``min_date`` is always set.
    """
    today = today or date.today()
    min_day = today + timedelta(days=PHASE_ONE_LEAD_DAYS)
    if not value:
        return DateCheck(valid=True, min_date=min_day.isoformat())

    selected = _parse_iso(value)
    if selected is None:
        return DateCheck(valid=False, error=INVALID_DATE_MESSAGE, min_date=min_day.isoformat())
    if selected < min_day:
        return DateCheck(
            valid=False,
            error=f"Use a date on or after {_display(min_day)}",
            min_date=min_day.isoformat(),
        )
    return DateCheck(valid=True, min_date=min_day.isoformat())


def validate_subsequent_phase_date(value: str, previous_phase_date: str | None) -> DateCheck:
    """Check that a phase starts at least three days after the previous one.

    The gap is not checked when the previous date is empty or malformed.
    """
    if not value:
        return DateCheck(valid=True)

    selected = _parse_iso(value)
    if selected is None:
        return DateCheck(valid=False, error=INVALID_DATE_MESSAGE)

    previous = _parse_iso(previous_phase_date) if previous_phase_date else None
    if previous is None:
        return DateCheck(valid=True)

    min_day = previous + timedelta(days=PHASE_GAP_DAYS)
    if selected < min_day:
        return DateCheck(
            valid=False,
            error=f"Use a date on or after {_display(min_day)}",
            min_date=min_day.isoformat(),
        )
    return DateCheck(valid=True, min_date=min_day.isoformat())


def validate_mural_end_date(
    value: str,
    phase_one_date: str | None,
    today: date | None = None,
) -> DateCheck:
    """Check the last day the mural accepts applications.

    The end date must be after *today* and before phase one.  The reported
    ``max_date`` is seven days before phase one, which is the date the form
    suggests; only dates on or after phase one itself are rejected.

    Args:
        value: Selected end date as ISO, or empty.
        phase_one_date: Phase one date as ISO, or empty when not set yet.
            A malformed phase one date is reported on its own field and
            skipped here.
        today: Reference day; defaults to the local date.
    """
    if not value:
        return DateCheck(valid=True)

    today = today or date.today()
    min_day = today + timedelta(days=1)
    selected = _parse_iso(value)
    if selected is None:
        return DateCheck(valid=False, error=INVALID_DATE_MESSAGE, min_date=min_day.isoformat())
    if selected <= today:
        return DateCheck(
            valid=False,
            error="The end date must be after today.",
            min_date=min_day.isoformat(),
        )

    phase_one = _parse_iso(phase_one_date) if phase_one_date else None
    if phase_one is None:
        return DateCheck(valid=True, min_date=min_day.isoformat())

    max_day = phase_one - timedelta(days=MURAL_PHASE_MARGIN_DAYS)
    if selected >= phase_one:
        return DateCheck(
            valid=False,
            error=(
                f"The application end date must be at least {MURAL_PHASE_MARGIN_DAYS} days "
                f"before phase one. Latest date: {_display(max_day)}"
            ),
            max_date=max_day.isoformat(),
        )
    return DateCheck(valid=True, min_date=min_day.isoformat(), max_date=max_day.isoformat())


def content_submission_deadline(phase_date: str | None) -> str | None:
    """Return the content submission deadline for a phase, as ISO."""
    day = _parse_iso(phase_date) if phase_date else None
    if day is None:
        return None
    return (day - timedelta(days=CONTENT_SUBMISSION_LEAD_DAYS)).isoformat()


def corrected_content_deadline(phase_date: str | None) -> str | None:
    """Return the deadline for resubmitting corrected content, as ISO."""
    day = _parse_iso(phase_date) if phase_date else None
    if day is None:
        return None
    return (day - timedelta(days=CORRECTION_SUBMISSION_LEAD_DAYS)).isoformat()


def mask_display_date(typed: str) -> str:
    """Format digits typed so far as ``DD/MM/YYYY``."""
    digits = _NON_DIGITS.sub("", typed)[:8]
    if len(digits) <= 2:
        return digits
    if len(digits) <= 4:
        return f"{digits[:2]}/{digits[2:]}"
    return f"{digits[:2]}/{digits[2:4]}/{digits[4:]}"


def parse_display_date(display: str) -> str | None:
    """Convert ``DD/MM/YYYY`` input to ISO.

    Separators are ignored, so ``25122024`` parses too.  Input with fewer
    than eight digits is treated as still being typed.

    Returns:
        The ISO date, or ``None`` for incomplete or impossible dates.
    """
    digits = _NON_DIGITS.sub("", display)
    if len(digits) < 8:
        return None

    day_part, month_part, year_part = digits[:2], digits[2:4], digits[4:8]
    d, m, y = int(day_part), int(month_part), int(year_part)
    if not (1 <= d <= 31 and 1 <= m <= 12 and 1900 <= y <= 2100):
        return None
    if d > calendar.monthrange(y, m)[1]:
        return None
    return f"{y:04d}-{month_part}-{day_part}"


def format_display_date(iso: str | None) -> str:
    """Convert an ISO date (or datetime) to ``DD/MM/YYYY``; empty when malformed."""
    if not iso or len(iso) < 10:
        return ""
    parts = iso[:10].split("-")
    if len(parts) != 3 or not all(parts):
        return ""
    year, month, day = parts
    return f"{day}/{month}/{year}"
