"""Tests for the backoffice command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest
import structlog
from mock_api import BASE_URL, RecordingTransport, api_path, body_of, ok

from backoffice import cli
from backoffice.cli import build_parser, configure_logging, format_json, format_table, main


@pytest.fixture()
def env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Configure the API through the environment and silence log setup."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("API_BASE_URL", BASE_URL)
    monkeypatch.setenv("API_TOKEN", "tok_cli")
    monkeypatch.setenv("WORKSPACE_ID", "ws_cli")
    monkeypatch.setenv("PRODUCTION", "false")
    monkeypatch.setattr(cli, "configure_logging", lambda production=False: None)
    structlog.configure(logger_factory=structlog.ReturnLoggerFactory())


class TestBuildParser:
    """Tests for argument parser construction."""

    def test_format_after_subcommand(self) -> None:
        args = build_parser().parse_args(["campaigns", "--format", "json"])
        assert args.command == "campaigns"
        assert args.output_format == "json"

    def test_move_arguments(self) -> None:
        args = build_parser().parse_args(
            ["move", "c1", "cu1", "applications", "rejected", "--campaign-user", "--feedback", "No"]
        )
        assert (args.from_status, args.to_status) == ("applications", "rejected")
        assert args.campaign_user
        assert args.feedback == "No"

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestFormatting:
    """Table and JSON output."""

    def test_table_truncates(self) -> None:
        output = format_table([{"name": "A very long influencer name"}], [("Name", "name", 10)])
        lines = output.splitlines()
        assert lines[0] == "Name"
        assert lines[2] == "A very ..."

    def test_table_empty(self) -> None:
        assert format_table([], [("Name", "name", 10)]) == "No results found."

    def test_json(self) -> None:
        assert json.loads(format_json([{"status": "curation"}])) == [{"status": "curation"}]


class TestOfflineCommands:
    """Commands that answer from the status tables alone."""

    def test_normalize(self, env: None, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["normalize", "curadoria", "on_hold", "--format", "json"]) == 0
        rows = json.loads(capsys.readouterr().out)
        assert rows == [
            {"input": "curadoria", "status": "curation", "known": True},
            {"input": "on_hold", "status": "on_hold", "known": False},
        ]

    def test_check_allowed(self, env: None, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["check", "curation", "invited", "--campaign-user"]) == 0
        assert capsys.readouterr().out.strip() == "allowed: Invitation sent after curation"

    def test_check_denied(self, env: None, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["check", "applications", "approved"]) == 1
        assert capsys.readouterr().out.startswith("denied: Cannot move")

    def test_targets(self, env: None, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["targets", "approved", "--campaign-user", "--format", "json"]) == 0
        statuses = [row["status"] for row in json.loads(capsys.readouterr().out)]
        assert statuses == ["content_pending", "rejected", "script_pending"]


class TestRemoteCommands:
    """Commands that call the API."""

    def test_campaigns(self, env: None, capsys: pytest.CaptureFixture[str]) -> None:
        transport = RecordingTransport(lambda r: ok([{"id": "c1", "title": "Launch"}]))
        assert main(["campaigns"], transport=transport) == 0
        out = capsys.readouterr().out
        assert "Launch" in out
        assert transport.last.headers["Workspace-Id"] == "ws_cli"
        assert transport.last.headers["Authorization"] == "Bearer tok_cli"

    def test_participants_filtered(self, env: None, capsys: pytest.CaptureFixture[str]) -> None:
        transport = RecordingTransport(
            lambda r: ok(
                [
                    {"id": "cu1", "name": "Ana", "status": "aprovado"},
                    {"id": "cu2", "name": "Bia", "status": "curadoria"},
                ]
            )
        )
        argv = ["participants", "c1", "--status", "approved", "--format", "json"]
        assert main(argv, transport) == 0
        rows = json.loads(capsys.readouterr().out)
        assert [row["id"] for row in rows] == ["cu1"]

    def test_move(self, env: None, capsys: pytest.CaptureFixture[str]) -> None:
        transport = RecordingTransport(lambda r: ok(None))
        code = main(["move", "c1", "cu1", "curation", "invited", "--campaign-user"], transport)
        assert code == 0
        assert api_path(transport.last) == "/campaigns/c1/users/cu1"
        assert body_of(transport.last) == {"action": "invited"}
        assert capsys.readouterr().out.strip() == "Invitation sent after curation"

    def test_denied_move_exits_1(self, env: None, capsys: pytest.CaptureFixture[str]) -> None:
        transport = RecordingTransport(lambda r: ok(None))
        argv = ["move", "c1", "cu1", "applications", "published", "--campaign-user"]
        code = main(argv, transport)
        assert code == 1
        assert transport.requests == []
        assert "error:" in capsys.readouterr().err

    def test_api_error_exits_1(self, env: None, capsys: pytest.CaptureFixture[str]) -> None:
        transport = RecordingTransport(lambda r: httpx.Response(403, json={"message": "Forbidden"}))
        assert main(["campaigns"], transport=transport) == 1
        assert "Forbidden" in capsys.readouterr().err

    def test_transport_error_exits_1(
        self, env: None, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("RETRY_ATTEMPTS", "1")

        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        assert main(["campaigns"], transport=RecordingTransport(refuse)) == 1
        assert "Connection refused" in capsys.readouterr().err


class TestConfigureLogging:
    """structlog configuration."""

    def test_production_uses_json(self) -> None:
        configure_logging(production=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert structlog.contextvars.get_contextvars()["service"] == "campaign-backoffice"

    def test_development_uses_console(self) -> None:
        configure_logging(production=False)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
