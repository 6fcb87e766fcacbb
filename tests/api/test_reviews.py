"""Tests for content and script review endpoints."""

from __future__ import annotations

import pytest
from mock_api import api_path, body_of, make_client, ok

from backoffice.api import contents, scripts
from backoffice.domain.errors import EmptySelectionError, FeedbackRequiredError


class TestContents:
    """Content listing, review and evaluation."""

    @pytest.mark.anyio()
    async def test_list_filters(self) -> None:
        client, transport = make_client(
            lambda r: ok([{"id": "ct1", "status": "pending", "previewUrl": "https://p"}])
        )
        async with client:
            result = await contents.list_contents(client, "c1", status="pending")
        assert result[0].preview_url == "https://p"
        assert dict(transport.last.url.params) == {"status": "pending"}

    @pytest.mark.anyio()
    async def test_approve_omits_empty_members(self) -> None:
        client, transport = make_client(lambda r: ok(None))
        async with client:
            await contents.approve_content(client, "c1", "ct1", feedback="", caption_feedback="ok")
        assert api_path(transport.last) == "/campaigns/c1/contents/ct1/approve"
        assert body_of(transport.last) == {"caption_feedback": "ok"}

    @pytest.mark.anyio()
    async def test_reject(self) -> None:
        client, transport = make_client(lambda r: ok(None))
        async with client:
            await contents.reject_content(
                client, "c1", "ct1", " Reshoot outdoors ", new_submission_deadline="2026-11-01"
            )
        assert body_of(transport.last) == {
            "feedback": "Reshoot outdoors",
            "new_submission_deadline": "2026-11-01",
        }

    @pytest.mark.anyio()
    async def test_reject_without_feedback(self) -> None:
        client, transport = make_client(lambda r: ok(None))
        async with client:
            with pytest.raises(FeedbackRequiredError):
                await contents.reject_content(client, "c1", "ct1", "")
        assert transport.requests == []

    @pytest.mark.anyio()
    async def test_evaluation(self) -> None:
        client, _ = make_client(
            lambda r: ok({"score": 7, "criteria": {"relevance": 8}, "recommendations": ["Cut"]})
        )
        async with client:
            evaluation = await contents.get_content_evaluation(client, "c1", "ct1")
        assert evaluation is not None
        assert evaluation.criteria.relevance == 8
        assert evaluation.recommendations == ["Cut"]

    @pytest.mark.anyio()
    async def test_missing_evaluation(self) -> None:
        client, _ = make_client(lambda r: ok(None))
        async with client:
            assert await contents.get_content_evaluation(client, "c1", "ct1") is None

    @pytest.mark.anyio()
    async def test_bulk(self) -> None:
        client, transport = make_client(lambda r: ok(None))
        async with client:
            await contents.bulk_approve_contents(client, "c1", ["a", "b"])
            await contents.bulk_reject_contents(client, "c1", ["c"], "Blurry", caption_feedback="x")
        approve, reject = transport.requests
        assert api_path(approve) == "/campaigns/c1/contents/bulk-approve"
        assert body_of(approve) == {"content_ids": ["a", "b"]}
        assert body_of(reject) == {
            "content_ids": ["c"],
            "feedback": "Blurry",
            "caption_feedback": "x",
        }

    @pytest.mark.anyio()
    async def test_bulk_empty_selection(self) -> None:
        client, _ = make_client(lambda r: ok(None))
        async with client:
            with pytest.raises(EmptySelectionError):
                await contents.bulk_approve_contents(client, "c1", [])


class TestScripts:
    """Script listing and review."""

    @pytest.mark.anyio()
    async def test_list_and_approve(self) -> None:
        client, transport = make_client(lambda r: ok([{"id": "s1", "script": "Hook first"}]))
        async with client:
            result = await scripts.list_scripts(client, "c1", phase_id="p1")
            await scripts.approve_script(client, "c1", "s1")
        assert result[0].script_text == "Hook first"
        assert dict(transport.requests[0].url.params) == {"phase_id": "p1"}
        assert api_path(transport.last) == "/campaigns/c1/scripts/s1/approve"
        assert transport.last.content == b""

    @pytest.mark.anyio()
    async def test_reject(self) -> None:
        client, transport = make_client(lambda r: ok(None))
        async with client:
            await scripts.reject_script(client, "c1", "s1", "Too long")
        assert body_of(transport.last) == {"feedback": "Too long"}

    @pytest.mark.anyio()
    async def test_bulk(self) -> None:
        client, transport = make_client(lambda r: ok(None))
        async with client:
            await scripts.bulk_approve_scripts(client, "c1", ["s1"])
            with pytest.raises(FeedbackRequiredError):
                await scripts.bulk_reject_scripts(client, "c1", ["s1"], "   ")
        assert len(transport.requests) == 1
        assert body_of(transport.last) == {"script_ids": ["s1"]}
