"""Command-line interface for the campaign backoffice.

Offline commands answer status lifecycle questions; the others call the
backoffice API with the configured token and workspace.  Output formats:
table (default) or JSON.

Usage::

    backoffice normalize curadoria aprovado
    backoffice check curation invited --campaign-user
    backoffice targets approved --campaign-user --automatic
    backoffice campaigns --format json
    backoffice participants camp_123 --status approved
    backoffice move camp_123 cu_9 applications rejected --campaign-user --feedback "Off brief"
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

import httpx
import structlog

from backoffice.api.campaign_users import list_campaign_users
from backoffice.api.campaigns import list_campaigns
from backoffice.api.client import BackofficeClient
from backoffice.config import get_settings, validate_credentials
from backoffice.domain.errors import BackofficeError
from backoffice.status.normalization import is_known_status, normalize_status
from backoffice.status.transitions import allowed_targets, check_transition, status_label
from backoffice.workflows.status_change import change_participant_status

logger = structlog.get_logger()

Column = tuple[str, str, int]

CAMPAIGN_COLUMNS: list[Column] = [
    ("ID", "id", 24),
    ("Title", "title", 32),
    ("Status", "status", 12),
    ("Max", "max_influencers", 5),
]

PARTICIPANT_COLUMNS: list[Column] = [
    ("ID", "id", 24),
    ("Name", "name", 24),
    ("Username", "username", 20),
    ("Status", "status", 18),
    ("Followers", "followers", 10),
]


def configure_logging(production: bool = False) -> None:
    """Configure structlog for production (JSON) or development (console).

    Log lines go to stderr so command output on stdout stays parseable.

    Args:
        production: JSON rendering at INFO level if ``True``, otherwise
            colored console rendering at DEBUG level.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if production:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        log_level = logging.INFO
    else:
        renderer = structlog.dev.ConsoleRenderer()
        log_level = logging.DEBUG

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(service="campaign-backoffice")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one sub-command per operation."""
    output = argparse.ArgumentParser(add_help=False)
    output.add_argument(
        "--format",
        type=str,
        choices=["table", "json"],
        default="table",
        dest="output_format",
        help="Output format (default: table)",
    )

    parser = argparse.ArgumentParser(prog="backoffice", description="Campaign backoffice tools")
    commands = parser.add_subparsers(dest="command", required=True)

    normalize = commands.add_parser(
        "normalize", parents=[output], help="Show the canonical form of statuses"
    )
    normalize.add_argument("statuses", nargs="+", metavar="STATUS")

    check = commands.add_parser(
        "check", parents=[output], help="Check whether a status move is allowed"
    )
    check.add_argument("from_status", metavar="FROM")
    check.add_argument("to_status", metavar="TO")
    check.add_argument("--campaign-user", action="store_true", help="Use the campaign-user table")

    targets = commands.add_parser(
        "targets", parents=[output], help="List the statuses reachable from STATUS"
    )
    targets.add_argument("status", metavar="STATUS")
    targets.add_argument("--campaign-user", action="store_true", help="Use the campaign-user table")
    targets.add_argument(
        "--automatic",
        action="store_true",
        help="Include statuses only the platform can set",
    )

    commands.add_parser("campaigns", parents=[output], help="List the workspace's campaigns")

    participants = commands.add_parser(
        "participants", parents=[output], help="List a campaign's users"
    )
    participants.add_argument("campaign_id", metavar="CAMPAIGN_ID")
    participants.add_argument("--status", type=str, help="Only show this status (any spelling)")

    move = commands.add_parser("move", parents=[output], help="Move a participant")
    move.add_argument("campaign_id", metavar="CAMPAIGN_ID")
    move.add_argument("participant_id", metavar="PARTICIPANT_ID")
    move.add_argument("from_status", metavar="FROM")
    move.add_argument("to_status", metavar="TO")
    move.add_argument("--campaign-user", action="store_true", help="Use the campaign-user table")
    move.add_argument("--feedback", type=str, help="Reason sent with a rejection")

    return parser


def format_table(rows: list[dict[str, Any]], columns: list[Column]) -> str:
    """Format rows as a fixed-width table; long cells are truncated.

    Args:
        rows: One dict per row.
        columns: ``(header, key, width)`` for each column.

    Returns:
        The table with a header row, or a placeholder when *rows* is empty.
    """
    if not rows:
        return "No results found."

    def truncate(value: Any, width: int) -> str:
        s = "" if value is None else str(value)
        if len(s) > width:
            return s[: width - 3] + "..."
        return s

    header_line = "  ".join(header.ljust(width) for header, _, width in columns)
    lines = [header_line, "-" * len(header_line)]
    for row in rows:
        lines.append(
            "  ".join(truncate(row.get(key), width).ljust(width) for _, key, width in columns)
        )
    return "\n".join(line.rstrip() for line in lines)


def format_json(rows: Any) -> str:
    """Format results as pretty-printed JSON."""
    return json.dumps(rows, indent=2, ensure_ascii=False)


def _emit(rows: list[dict[str, Any]], columns: list[Column], output_format: str) -> None:
    print(format_json(rows) if output_format == "json" else format_table(rows, columns))


def _normalize(args: argparse.Namespace) -> int:
    rows = [
        {"input": raw, "status": normalize_status(raw), "known": is_known_status(raw)}
        for raw in args.statuses
    ]
    columns: list[Column] = [
        ("Input", "input", 24),
        ("Status", "status", 18),
        ("Known", "known", 6),
    ]
    _emit(rows, columns, args.output_format)
    return 0


def _check(args: argparse.Namespace) -> int:
    decision = check_transition(args.from_status, args.to_status, args.campaign_user)
    if args.output_format == "json":
        print(format_json(decision.model_dump()))
    elif decision.allowed:
        print(f"allowed: {decision.note}")
    else:
        print(f"denied: {decision.reason}")
    return 0 if decision.allowed else 1


def _targets(args: argparse.Namespace) -> int:
    found = allowed_targets(args.status, args.campaign_user, manual=not args.automatic)
    rows = [{"status": target, "label": status_label(target)} for target in found]
    _emit(rows, [("Status", "status", 18), ("Label", "label", 28)], args.output_format)
    return 0


async def run_remote(args: argparse.Namespace, client: BackofficeClient) -> int:
    """Run a command that talks to the API and return the exit code."""
    if args.command == "campaigns":
        campaigns = await list_campaigns(client)
        _emit(
            [c.model_dump(mode="json") for c in campaigns], CAMPAIGN_COLUMNS, args.output_format
        )
        return 0

    if args.command == "participants":
        users = await list_campaign_users(client, args.campaign_id)
        if args.status:
            wanted = normalize_status(args.status)
            users = [u for u in users if u.status == wanted]
        _emit([u.model_dump(mode="json") for u in users], PARTICIPANT_COLUMNS, args.output_format)
        return 0

    if args.command == "move":
        decision = await change_participant_status(
            client,
            args.campaign_id,
            args.participant_id,
            args.from_status,
            args.to_status,
            args.campaign_user,
            args.feedback,
        )
        if args.output_format == "json":
            print(format_json(decision.model_dump()))
        else:
            print(decision.note)
        return 0

    raise ValueError(f"Unknown remote command: {args.command}")


async def _run_with_client(
    args: argparse.Namespace,
    transport: httpx.AsyncBaseTransport | None,
) -> int:
    async with BackofficeClient.from_settings(get_settings(), transport=transport) as client:
        return await run_remote(args, client)


def main(argv: list[str] | None = None, transport: httpx.AsyncBaseTransport | None = None) -> int:
    """Parse arguments, run the command and return the exit code.

    Args:
        argv: Arguments without the program name; defaults to ``sys.argv[1:]``.
        transport: Optional ``httpx`` transport for the API client.
    """
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(production=settings.production)

    if args.command == "normalize":
        return _normalize(args)
    if args.command == "check":
        return _check(args)
    if args.command == "targets":
        return _targets(args)

    validate_credentials(settings)
    try:
        return asyncio.run(_run_with_client(args, transport))
    except (BackofficeError, httpx.HTTPError) as exc:
        logger.error("command_failed", command=args.command, error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
