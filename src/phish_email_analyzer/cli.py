"""Command line front end over a JSON state file."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Sequence

from phish_email_analyzer.analysis.collection import EmailCollection
from phish_email_analyzer.analysis.events import EventRecorder, LoggingEventRecorder
from phish_email_analyzer.config.settings import AppConfig, load_config
from phish_email_analyzer.domain.email.models import EmailMessage
from phish_email_analyzer.errors import AnalyzerError
from phish_email_analyzer.infra.logging_utils import configure_logging, get_logger
from phish_email_analyzer.persistence.store import load_collection, save_collection
from phish_email_analyzer.scoring.scorer import score_message

logger = get_logger(__name__)


def _recorder(cfg: AppConfig) -> EventRecorder | None:
    return LoggingEventRecorder() if cfg.audit_events else None


def _message_from_args(args: argparse.Namespace) -> EmailMessage:
    return EmailMessage(sender=args.sender, subject=args.subject, body=args.body, url=args.url)


def _print_subjects(emails: list[EmailMessage], empty_text: str, title: str) -> None:
    if not emails:
        print(empty_text)
        return
    print(title)
    for index, email in enumerate(emails, start=1):
        print(f"{index}. {email.subject}")


def _print_email(email: EmailMessage) -> None:
    print("Email:")
    print(f"Sender: {email.sender}")
    print(f"Subject: {email.subject}")
    print(f"Body: {email.body}")
    print(f"URL: {email.url}")
    print("")
    print("Email Report:")
    print(email.report())


def run_add(args: argparse.Namespace, cfg: AppConfig) -> int:
    collection = load_collection(cfg.state_file, recorder=_recorder(cfg))
    email = _message_from_args(args)
    score_message(email)
    collection.insert(email)
    save_collection(cfg.state_file, collection)
    print("Email added successfully!")
    print(email.report())
    return 0


def run_list(args: argparse.Namespace, cfg: AppConfig) -> int:
    collection = load_collection(cfg.state_file, recorder=_recorder(cfg))
    _print_subjects(collection.all(), "No emails available in the collection.", "List of All Emails:")
    return 0


def run_flagged(args: argparse.Namespace, cfg: AppConfig) -> int:
    collection = load_collection(cfg.state_file, recorder=_recorder(cfg))
    _print_subjects(collection.flagged(), "No flagged emails available.", "List of Flagged Emails:")
    return 0


def run_show(args: argparse.Namespace, cfg: AppConfig) -> int:
    collection = load_collection(cfg.state_file, recorder=_recorder(cfg))
    emails = collection.flagged() if args.flagged else collection.all()
    if not 1 <= args.number <= len(emails):
        print(f"error: no email number {args.number} (have {len(emails)})", file=sys.stderr)
        return 1
    _print_email(emails[args.number - 1])
    return 0


def summary_lines(collection: EmailCollection) -> list[str]:
    return [
        "Summary Report:",
        "Most common indicator:",
        collection.most_common_indicator(),
        "",
        "Indicator percentages:",
        collection.indicator_percentages(),
        "",
        "Flagged email percentage:",
        collection.flagged_percentage(),
    ]


def run_summary(args: argparse.Namespace, cfg: AppConfig) -> int:
    collection = load_collection(cfg.state_file, recorder=_recorder(cfg))
    print("\n".join(summary_lines(collection)))
    return 0


def run_score(args: argparse.Namespace, cfg: AppConfig) -> int:
    email = _message_from_args(args)
    result = score_message(email)
    payload = {
        "risk_score": result.risk_score,
        "flagged": result.flagged,
        "primary_indicator": result.primary_indicator,
        "breakdown": result.breakdown(),
    }
    print(json.dumps(payload, ensure_ascii=True))
    return 0


def _add_message_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--sender", default="", help="Sender address.")
    parser.add_argument("--subject", default="", help="Subject line.")
    parser.add_argument("--body", default="", help="Body text.")
    parser.add_argument("--url", default="", help="URL contained in the email.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="phish-email-analyzer")
    parser.add_argument("--config", help="Path to a YAML config file.")
    parser.add_argument("--state", help="Override the state file path.")
    commands = parser.add_subparsers(dest="command", required=True)

    add = commands.add_parser("add", help="Score an email and add it to the saved collection.")
    _add_message_arguments(add)
    add.set_defaults(handler=run_add)

    commands.add_parser("list", help="List all saved emails.").set_defaults(handler=run_list)
    commands.add_parser("flagged", help="List flagged emails.").set_defaults(handler=run_flagged)

    show = commands.add_parser("show", help="Show one email and its report.")
    show.add_argument("number", type=int, help="1-based position in the listing.")
    show.add_argument("--flagged", action="store_true", help="Index into the flagged listing.")
    show.set_defaults(handler=run_show)

    commands.add_parser("summary", help="Print collection statistics.").set_defaults(handler=run_summary)

    score = commands.add_parser("score", help="Score one email without saving it.")
    _add_message_arguments(score)
    score.set_defaults(handler=run_score)
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg, _ = load_config(args.config)
        if args.state:
            cfg = cfg.model_copy(update={"state_file": args.state})
        configure_logging(cfg.log_level, cfg.log_format, force=True)
        return args.handler(args, cfg)
    except AnalyzerError as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


def main() -> None:
    raise SystemExit(run())
