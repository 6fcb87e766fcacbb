"""Tests for API record parsing and request payloads."""

from __future__ import annotations

from backoffice.domain.models import (
    CampaignDetail,
    CampaignPayload,
    CampaignPhase,
    CampaignScript,
    CampaignUser,
    ChatMessage,
    ContentEvaluation,
    DashboardResponse,
    Influencer,
    Niche,
    Notification,
    PhasePayload,
    StatusHistoryEntry,
)


class TestFieldSpellings:
    """Fields accept both snake_case and camelCase spellings."""

    def test_camel_case_participant(self) -> None:
        user = CampaignUser.model_validate(
            {"id": 7, "userId": 42, "name": "Ana", "status": "curadoria"}
        )
        assert user.id == "7"
        assert user.user_id == "42"
        assert user.status == "curation"

    def test_snake_case_influencer(self) -> None:
        influencer = Influencer.model_validate(
            {
                "id": "inf_1",
                "name": "Bia",
                "social_network": "instagram",
                "recommendation_reason": "Strong engagement",
            }
        )
        assert influencer.social_network == "instagram"
        assert influencer.recommendation_reason == "Strong engagement"

    def test_phase_legacy_names(self) -> None:
        phase = CampaignPhase.model_validate(
            {
                "id": "ph_1",
                "publish_date": "2026-11-20",
                "contents": [{"type": "instagram", "options": [{"type": "story", "quantity": 2}]}],
            }
        )
        assert phase.post_date == "2026-11-20"
        assert phase.formats[0].options[0].quantity == 2

    def test_script_text_alias(self) -> None:
        script = CampaignScript.model_validate({"id": "s1", "script": "Open with the product"})
        assert script.script_text == "Open with the product"

    def test_chat_message_content_alias(self) -> None:
        message = ChatMessage.model_validate({"id": "m1", "senderId": "u1", "content": "Hi"})
        assert message.message == "Hi"
        assert message.sender_id == "u1"

    def test_payment_value_alias(self) -> None:
        detail = CampaignDetail.model_validate(
            {"id": "c1", "title": "Launch", "payment_value": {"amount": 1500, "currency": "BRL"}}
        )
        assert detail.payment_method_details is not None
        assert detail.payment_method_details.amount == 1500


class TestStatusNormalization:
    """Participant statuses are normalized on the way in."""

    def test_missing_status_is_applications(self) -> None:
        user = CampaignUser.model_validate({"id": "1", "name": "Caio", "status": None})
        assert user.status == "applications"

    def test_unknown_status_kept(self) -> None:
        user = CampaignUser.model_validate({"id": "1", "name": "Caio", "status": "on_hold"})
        assert user.status == "on_hold"

    def test_history_entry(self) -> None:
        entry = StatusHistoryEntry.model_validate(
            {"id": "h1", "status": "aprovado", "timestamp": "2026-10-01T10:00:00Z"}
        )
        assert entry.status == "approved"


class TestRecords:
    """Miscellaneous record behavior."""

    def test_unknown_fields_ignored(self) -> None:
        niche = Niche.model_validate({"id": 3, "name": "Beauty", "color": "#fff"})
        assert niche.parent_id is None

    def test_notification_is_read(self) -> None:
        unread = Notification.model_validate({"id": "n1", "type": "new_message"})
        read = Notification.model_validate(
            {"id": "n2", "type": "new_message", "read_at": "2026-10-01T10:00:00Z"}
        )
        assert not unread.is_read
        assert read.is_read

    def test_evaluation_defaults(self) -> None:
        evaluation = ContentEvaluation.model_validate({"score": 8.5})
        assert evaluation.criteria.quality == 0.0
        assert evaluation.recommendations == []

    def test_dashboard_nested(self) -> None:
        dashboard = DashboardResponse.model_validate(
            {
                "phases": [{"id": "ph_1"}],
                "influencers": [{"id": "i1", "name": "Ana", "status": "publicado"}],
                "metrics": {"reach": 1000},
            }
        )
        assert dashboard.influencers[0].status == "published"
        assert dashboard.metrics.reach == 1000
        assert dashboard.contents == []


class TestPayloads:
    """Request payloads omit unset members."""

    def test_campaign_payload_body(self) -> None:
        payload = CampaignPayload(title="Launch", max_influencers=5)
        assert payload.to_body() == {"title": "Launch", "max_influencers": 5}

    def test_phase_payload_body(self) -> None:
        payload = PhasePayload(objective="Awareness", post_date="2026-11-20")
        assert payload.to_body() == {"objective": "Awareness", "post_date": "2026-11-20"}
