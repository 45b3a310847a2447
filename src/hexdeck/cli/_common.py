"""Shared helpers for CLI command handlers."""

import json
import logging
import sys

from hexdeck.config import read_config
from hexdeck.frontmatter import is_planner_text
from hexdeck.model.document import PlannerFile
from hexdeck.model.errors import MutationError
from hexdeck.models import Card
from hexdeck.parser import STATUS_TO_CHECKBOX


def planner_path(args) -> str:
    """The --file argument, or the configured default."""
    return args.file or read_config()["file"]


def open_planner_or_die(args) -> PlannerFile:
    """Open the planner file. Exit 1 if it is missing or not a weekly planner."""
    planner = PlannerFile(planner_path(args))
    if not planner.path.is_file():
        error(f"Planner file '{planner.path}' not found.", args.json)
    if not is_planner_text(planner.read()):
        error(f"'{planner.path}' is not a weekly planner (frontmatter needs week, year and tags).", args.json)
    return planner


def mutate_or_die(planner: PlannerFile, json_mode: bool, operation, *args, **kwargs) -> str:
    """Run a mutation against the file. Exit 1 with the failure message."""
    try:
        return planner.mutate(operation, *args, **kwargs)
    except MutationError as e:
        error(str(e), json_mode)


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def format_card_line(card: Card, indent: str = "") -> str:
    """Format a card as a text line."""
    checkbox = STATUS_TO_CHECKBOX[card.status]
    extras = [f"#{card.project}"] if card.project else []
    if card.due_date:
        extras.append(f"due {card.due_date}")
    if card.priority:
        extras.append(card.priority)
    if card.time_estimate:
        extras.append(card.time_estimate)
    suffix = f"  ({', '.join(extras)})" if extras else ""
    return f"{indent}{card.id:<9} {checkbox} {card.title}{suffix}"


def configure_logging(verbose: int = 0, level: str | None = None) -> None:
    """Log to stderr; -v for INFO, -vv for DEBUG, else the configured level."""
    if verbose >= 2:
        log_level = logging.DEBUG
    elif verbose == 1:
        log_level = logging.INFO
    else:
        log_level = getattr(logging, (level or "warning").upper(), logging.WARNING)
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
        level=log_level,
    )
