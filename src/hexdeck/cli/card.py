"""Handlers for 'hexdeck card' and 'hexdeck subtask' commands."""

import datetime
import sys

from hexdeck.cli._common import (
    error,
    format_card_line,
    mutate_or_die,
    open_planner_or_die,
    output_json,
    output_result,
)
from hexdeck.config import read_config
from hexdeck.model.card import (
    add_card,
    delete_card,
    edit_body,
    edit_card,
    move_to_day,
    move_to_section,
    set_status,
    toggle_sub_task,
)
from hexdeck.model.document import PlannerFile
from hexdeck.model.week import move_to_week, next_week, week_file_name
from hexdeck.models import all_cards, card_to_dict, find_card


def card_list(args) -> int:
    """List cards, optionally filtered to one day or section."""
    planner = open_planner_or_die(args)
    cards = all_cards(planner.board())

    if args.day:
        cards = [c for c in cards if c.day and c.day.lower() == args.day.lower()]
    if args.section:
        cards = [c for c in cards if c.section == args.section]

    if args.json:
        output_json([card_to_dict(c) for c in cards])
        return 0

    group = None
    for card in cards:
        where = card.day or card.section
        if where != group:
            print(where)
            group = where
        print(format_card_line(card, indent="  "))

    return 0


def card_get(args) -> int:
    """Show one card with its body and sub-tasks."""
    planner = open_planner_or_die(args)
    card = find_card(planner.board(), args.id)
    if card is None:
        error(f"Card not found: {args.id}", args.json)

    if args.json:
        output_json(card_to_dict(card))
        return 0

    print(format_card_line(card))
    for line in card.body:
        print(f"    {line}")
    for sub_task in card.sub_tasks:
        print(f"    [{sub_task.status}] {sub_task.text}  (line {sub_task.line_number})")

    return 0


def card_add(args) -> int:
    """Add a new todo card to a day or section."""
    planner = open_planner_or_die(args)

    day = args.day
    section = args.section
    if not day and not section:
        section = read_config()["add_section"]

    mutate_or_die(planner, args.json, add_card, args.title, day=day, section=section)

    target = day or section
    output_result({"title": args.title, "target": target}, f"Added '{args.title}' to {target}", args.json)
    return 0


def card_status(args) -> int:
    """Set a card's status in place."""
    planner = open_planner_or_die(args)
    mutate_or_die(planner, args.json, set_status, args.id, args.status)
    output_result({"id": args.id, "status": args.status}, f"Set {args.id} to {args.status}", args.json)
    return 0


def _move_to_week(planner, args) -> int:
    """Move a card into another week's planner beside this one."""
    frontmatter = planner.board().frontmatter
    try:
        if getattr(args, "next_week", False):
            if not frontmatter.week or not frontmatter.year:
                error("Planner has no week and year to count from.", args.json)
            week, year = next_week(frontmatter.week, frontmatter.year)
        else:
            week = args.week
            year = getattr(args, "year", None) or frontmatter.year or datetime.date.today().isocalendar()[0]
        target = PlannerFile(planner.path.parent / week_file_name(week, year))
        move_to_week(planner, args.id, target, week, year, status=args.status, weekdays=read_config()["weekdays"])
    except ValueError as e:
        error(str(e), args.json)

    output_result(
        {"id": args.id, "week": week, "year": year, "file": str(target.path)},
        f"Moved {args.id} to week {week} of {year} ({target.path})",
        args.json,
    )
    return 0


def card_move(args) -> int:
    """Move a card within the planner or to another week."""
    planner = open_planner_or_die(args)

    if getattr(args, "week", None) or getattr(args, "next_week", False):
        return _move_to_week(planner, args)

    if args.day:
        mutate_or_die(planner, args.json, move_to_day, args.id, args.day, status=args.status)
        target = args.day
    else:
        mutate_or_die(planner, args.json, move_to_section, args.id, args.section, status=args.status)
        target = args.section

    output_result({"id": args.id, "target": target}, f"Moved {args.id} to {target}", args.json)
    return 0


# (flag, field, label)
FIELD_EDITS = (
    ("title", "title", "title"),
    ("due", "due_date", "due date"),
    ("estimate", "time_estimate", "time estimate"),
    ("priority", "priority", "priority"),
    ("project", "project", "project"),
)


def card_set(args) -> int:
    """Edit card fields in one change; an empty value clears a field."""
    planner = open_planner_or_die(args)

    changes = {}
    changed = []
    for attr, field, label in FIELD_EDITS:
        value = getattr(args, attr, None)
        if value is None:
            continue
        changes[field] = value
        changed.append(label)

    if not changes:
        error("Nothing to change.", args.json)

    mutate_or_die(planner, args.json, edit_card, args.id, **changes)

    output_result(
        {"id": args.id, "changed": changed},
        f"Updated {args.id}: {', '.join(changed)}",
        args.json,
    )
    return 0


def card_body(args) -> int:
    """Replace a card's body with lines read from stdin."""
    planner = open_planner_or_die(args)
    body = sys.stdin.read().splitlines()
    mutate_or_die(planner, args.json, edit_body, args.id, body)
    output_result({"id": args.id}, f"Updated body of {args.id}", args.json)
    return 0


def card_delete(args) -> int:
    """Delete a card and its nested content."""
    planner = open_planner_or_die(args)
    mutate_or_die(planner, args.json, delete_card, args.id)
    output_result({"id": args.id}, f"Deleted {args.id}", args.json)
    return 0


def subtask_toggle(args) -> int:
    """Cycle a sub-task checkbox: todo, in-progress, done."""
    planner = open_planner_or_die(args)
    mutate_or_die(planner, args.json, toggle_sub_task, args.line)
    output_result({"line": args.line}, f"Toggled sub-task on line {args.line}", args.json)
    return 0
