"""Tests for campaign date rules."""

from datetime import date

import pytest

from backoffice.campaign.dates import (
    INVALID_DATE_MESSAGE,
    content_submission_deadline,
    corrected_content_deadline,
    format_display_date,
    mask_display_date,
    parse_display_date,
    phase_one_min_date,
    validate_mural_end_date,
    validate_phase_one_date,
    validate_subsequent_phase_date,
)

TODAY = date(2026, 10, 19)


class TestPhaseOne:
    """Phase one starts at least ten days from today."""

    def test_min_date(self) -> None:
        assert phase_one_min_date(TODAY) == "2026-10-29"

    def test_boundary_is_valid(self) -> None:
        check = validate_phase_one_date("2026-10-29", TODAY)
        assert check.valid
        assert check.min_date == "2026-10-29"

    def test_too_early(self) -> None:
        check = validate_phase_one_date("2026-10-28", TODAY)
        assert not check.valid
        assert check.error == "Use a date on or after 29/10/2026"

    def test_empty_is_valid(self) -> None:
        check = validate_phase_one_date("", TODAY)
        assert check.valid
        assert check.min_date == "2026-10-29"


class TestSubsequentPhase:
    """Later phases start at least three days after the previous one."""

    @pytest.mark.parametrize(
        ("value", "valid"),
        [("2026-11-03", False), ("2026-11-04", True), ("2026-12-01", True)],
    )
    def test_gap(self, value: str, valid: bool) -> None:
        check = validate_subsequent_phase_date(value, "2026-11-01")
        assert check.valid is valid
        assert check.min_date == "2026-11-04"

    @pytest.mark.parametrize(("value", "previous"), [("", "2026-11-01"), ("2026-11-02", "")])
    def test_empty_skips_check(self, value: str, previous: str) -> None:
        assert validate_subsequent_phase_date(value, previous).valid


class TestMuralEndDate:
    """The mural closes after today and before phase one."""

    def test_today_rejected(self) -> None:
        check = validate_mural_end_date("2026-10-19", "2026-11-10", TODAY)
        assert not check.valid
        assert check.min_date == "2026-10-20"

    def test_on_phase_one_rejected(self) -> None:
        check = validate_mural_end_date("2026-11-10", "2026-11-10", TODAY)
        assert not check.valid
        assert check.max_date == "2026-11-03"
        assert check.error is not None
        assert "03/11/2026" in check.error

    def test_before_phase_one_accepted(self) -> None:
        check = validate_mural_end_date("2026-11-08", "2026-11-10", TODAY)
        assert check.valid
        assert check.min_date == "2026-10-20"
        assert check.max_date == "2026-11-03"

    def test_without_phase_one(self) -> None:
        check = validate_mural_end_date("2026-12-31", None, TODAY)
        assert check.valid
        assert check.max_date is None

    def test_empty_is_valid(self) -> None:
        assert validate_mural_end_date("", "2026-11-10", TODAY).valid


class TestDeadlines:
    """Submission deadlines derived from the phase date."""

    def test_content_deadline(self) -> None:
        assert content_submission_deadline("2026-11-10") == "2026-11-06"

    def test_content_deadline_across_month(self) -> None:
        assert content_submission_deadline("2026-12-02") == "2026-11-28"

    def test_corrected_deadline(self) -> None:
        assert corrected_content_deadline("2026-11-10") == "2026-11-09"

    def test_missing_phase_date(self) -> None:
        assert content_submission_deadline(None) is None
        assert corrected_content_deadline("") is None


class TestMalformedDates:
    """Malformed ISO input becomes a field error, never an exception."""

    @pytest.mark.parametrize("value", ["2026-13-40", "25/02/2026", "soon"])
    def test_phase_one(self, value: str) -> None:
        check = validate_phase_one_date(value, TODAY)
        assert not check.valid
        assert check.error == INVALID_DATE_MESSAGE

    def test_subsequent_phase(self) -> None:
        check = validate_subsequent_phase_date("2026-02-30", "2026-11-01")
        assert not check.valid
        assert check.error == INVALID_DATE_MESSAGE

    def test_malformed_previous_skips_gap(self) -> None:
        assert validate_subsequent_phase_date("2026-11-02", "not-a-date").valid

    def test_mural_end_date(self) -> None:
        check = validate_mural_end_date("25/02/2026", "2026-11-10", TODAY)
        assert not check.valid
        assert check.error == INVALID_DATE_MESSAGE

    def test_mural_with_malformed_phase_one(self) -> None:
        check = validate_mural_end_date("2026-11-01", "2026-13-40", TODAY)
        assert check.valid
        assert check.max_date is None

    def test_deadlines(self) -> None:
        assert content_submission_deadline("2026-13-40") is None
        assert corrected_content_deadline("garbage") is None


class TestDisplayDates:
    """DD/MM/YYYY input and output."""

    @pytest.mark.parametrize(
        ("display", "expected"),
        [
            ("25/12/2024", "2024-12-25"),
            ("25122024", "2024-12-25"),
            ("29/02/2028", "2028-02-29"),
            ("25/12/24", None),
            ("25/1", None),
            ("31/02/2026", None),
            ("00/12/2024", None),
            ("12/13/2024", None),
            ("01/01/1899", None),
            ("", None),
        ],
    )
    def test_parse(self, display: str, expected: str | None) -> None:
        assert parse_display_date(display) == expected

    @pytest.mark.parametrize(
        ("iso", "expected"),
        [
            ("2026-11-10", "10/11/2026"),
            ("2026-11-10T12:00:00Z", "10/11/2026"),
            ("2026-11", ""),
            ("", ""),
            (None, ""),
        ],
    )
    def test_format(self, iso: str | None, expected: str) -> None:
        assert format_display_date(iso) == expected

    @pytest.mark.parametrize(
        ("typed", "expected"),
        [("2", "2"), ("2512", "25/12"), ("25122", "25/12/2"), ("25/12/20249", "25/12/2024")],
    )
    def test_mask(self, typed: str, expected: str) -> None:
        assert mask_display_date(typed) == expected
