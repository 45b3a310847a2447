"""Card mutation operations for hexdeck boards.

Every operation takes the current document text, re-parses it, and
returns a single ``TextEdit``. Nothing is cached between calls, so card
ids must come from a parse of the same text.
"""

import datetime
import logging
import re
from dataclasses import replace

from hexdeck.metadata import parse_all_metadata
from hexdeck.model.edit import TextEdit, newline_of, relocate, replace_lines
from hexdeck.model.errors import (
    CardNotFound,
    DayNotFound,
    InvalidStatus,
    InvalidValue,
    SectionNotFound,
    SubTaskNotFound,
    UnknownCommand,
)
from hexdeck.model.line import PREFIX_RE, LineFields, render_line
from hexdeck.model.span import card_span, insertion_point, is_day
from hexdeck.models import PRIORITIES, SECTION_KEYS, STATUSES, BoardData, Card, all_cards, find_card
from hexdeck.parser import INDENTED_CHECKBOX_RE, STATUS_TO_CHECKBOX, parse_board, split_lines

logger = logging.getLogger(__name__)

# [ ] -> [/] -> [x] -> [ ]
NEXT_STATUS = {"todo": "in-progress", "in-progress": "done", "done": "todo"}

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
ESTIMATE_RE = re.compile(r"^\d+[hm]$")
PROJECT_RE = re.compile(r"^[A-Za-z0-9_-]+$")

BODY_INDENT = "  "


def _load(text: str) -> tuple[BoardData, list[str]]:
    return parse_board(text), split_lines(text)


def _require_card(board: BoardData, card_id: str) -> Card:
    card = find_card(board, card_id)
    if card is None:
        logger.info("card %s not found", card_id)
        raise CardNotFound(card_id)
    return card


def _require_status(status: str) -> None:
    if status not in STATUSES:
        logger.info("rejecting status %r", status)
        raise InvalidStatus(status)


def _clean_title(title: str) -> str:
    title = " ".join((title or "").split())
    if not title:
        raise InvalidValue("title", title)
    return title


def _replace_checkbox(lines: list[str], index: int, status: str) -> TextEdit:
    """Edit swapping only the checkbox token on one line."""
    match = PREFIX_RE.match(lines[index])
    start, end = match.span(2)
    return TextEdit(index, start, index, end, STATUS_TO_CHECKBOX[status])


def set_status(text: str, card_id: str, status: str) -> TextEdit:
    """Change a card's checkbox in place."""
    _require_status(status)
    board, lines = _load(text)
    card = _require_card(board, card_id)
    edit = _replace_checkbox(lines, card.line_number - 1, status)
    logger.debug("set %s to %s", card_id, status)
    return edit


def toggle_sub_task(text: str, line_number: int) -> TextEdit:
    """Cycle the sub-task on a 1-based line: todo, in-progress, done, todo."""
    board, lines = _load(text)
    for card in all_cards(board):
        for sub_task in card.sub_tasks:
            if sub_task.line_number == line_number:
                status = NEXT_STATUS[sub_task.status]
                logger.debug("sub-task on line %d now %s", line_number, status)
                return _replace_checkbox(lines, line_number - 1, status)
    logger.info("no sub-task on line %d", line_number)
    raise SubTaskNotFound(line_number)


def _move(text: str, card_id: str, target: str, status: str | None, not_found: Exception) -> TextEdit:
    """Relocate a card's span to the end of a day or section."""
    if status is not None:
        _require_status(status)
    board, lines = _load(text)
    card = _require_card(board, card_id)
    destination = insertion_point(lines, target)
    if destination is None:
        logger.info("no heading for %s", target)
        raise not_found

    start, end = card_span(lines, card.line_number - 1)
    block = [render_line(card.raw_line, LineFields.from_card(card), status)] + lines[start + 1 : end]
    moved = relocate(lines, start, end, destination, block)

    lo, hi = min(start, destination), max(end, destination)
    logger.debug("move %s lines %d-%d to %s at %d", card_id, start, end, target, destination)
    return replace_lines(lines, lo, hi, moved[lo:hi], newline_of(text))


def move_to_day(text: str, card_id: str, day: str, status: str | None = None) -> TextEdit:
    """Move a card (with its sub-tasks and body) to the end of a day."""
    if not is_day(day):
        raise DayNotFound(day)
    return _move(text, card_id, day, status, DayNotFound(day))


def move_to_section(text: str, card_id: str, section: str, status: str | None = None) -> TextEdit:
    """Move a card to the end of a backlog bucket or long-term section."""
    if section not in SECTION_KEYS:
        raise SectionNotFound(section)
    return _move(text, card_id, section, status, SectionNotFound(section))


def _edit_fields(text: str, card_id: str, **changes) -> TextEdit:
    """Rebuild a card's anchor line with some fields replaced."""
    board, lines = _load(text)
    card = _require_card(board, card_id)
    index = card.line_number - 1
    fields = replace(LineFields.from_card(card), **changes)
    logger.debug("edit %s: %s", card_id, changes)
    return TextEdit(index, 0, index, len(lines[index]), render_line(card.raw_line, fields))


def _check_title(title: str) -> str:
    """A title that reads back unchanged: no project, date, priority or estimate tokens."""
    title = _clean_title(title)
    if parse_all_metadata(title).clean_title != title:
        raise InvalidValue("title", title)
    return title


def _check_due_date(due_date: str | None) -> str | None:
    due_date = (due_date or "").strip() or None
    if due_date is not None:
        try:
            if not DATE_RE.match(due_date):
                raise ValueError(due_date)
            datetime.date.fromisoformat(due_date)
        except ValueError:
            raise InvalidValue("due date", due_date) from None
    return due_date


def _check_time_estimate(time_estimate: str | None) -> str | None:
    time_estimate = (time_estimate or "").strip() or None
    if time_estimate is not None and not ESTIMATE_RE.match(time_estimate):
        raise InvalidValue("time estimate", time_estimate)
    return time_estimate


def _check_priority(priority: str | None) -> str | None:
    priority = (priority or "").strip() or None
    if priority is not None and priority not in PRIORITIES:
        raise InvalidValue("priority", priority)
    return priority


def _check_project(project: str | None) -> str | None:
    project = (project or "").strip().lstrip("#") or None
    if project is not None and not PROJECT_RE.match(project):
        raise InvalidValue("project", project)
    return project


# LineFields attribute -> validator
FIELD_CHECKS = {
    "title": _check_title,
    "due_date": _check_due_date,
    "time_estimate": _check_time_estimate,
    "priority": _check_priority,
    "project": _check_project,
}


def edit_title(text: str, card_id: str, title: str) -> TextEdit:
    return _edit_fields(text, card_id, title=_check_title(title))


def edit_due_date(text: str, card_id: str, due_date: str | None) -> TextEdit:
    """Set or clear (empty/None) a card's due date."""
    return _edit_fields(text, card_id, due_date=_check_due_date(due_date))


def edit_time_estimate(text: str, card_id: str, time_estimate: str | None) -> TextEdit:
    """Set or clear a card's estimate, e.g. ``2h`` or ``30m``."""
    return _edit_fields(text, card_id, time_estimate=_check_time_estimate(time_estimate))


def set_priority(text: str, card_id: str, priority: str | None) -> TextEdit:
    """Set or clear a card's priority: high, medium or low."""
    return _edit_fields(text, card_id, priority=_check_priority(priority))


def edit_project(text: str, card_id: str, project: str | None) -> TextEdit:
    """Set or clear a card's #project tag."""
    return _edit_fields(text, card_id, project=_check_project(project))


def edit_card(text: str, card_id: str, **changes) -> TextEdit:
    """Change several fields in one edit.

    Every value is validated before the line is rebuilt, so one bad
    value leaves the card untouched.
    """
    checked = {}
    for name, value in changes.items():
        check = FIELD_CHECKS.get(name)
        if check is None:
            raise InvalidValue("field", name)
        checked[name] = check(value)
    if not checked:
        raise InvalidValue("field", "")
    return _edit_fields(text, card_id, **checked)


def edit_body(text: str, card_id: str, body: list[str]) -> TextEdit:
    """Replace a card's body lines, keeping its sub-task lines after them."""
    board, lines = _load(text)
    card = _require_card(board, card_id)
    start, end = card_span(lines, card.line_number - 1)
    sub_task_lines = [line for line in lines[start + 1 : end] if INDENTED_CHECKBOX_RE.match(line)]
    body_lines = [BODY_INDENT + line.strip() for line in body if line.strip()]
    block = [lines[start]] + body_lines + sub_task_lines
    logger.debug("rewrite body of %s: %d lines", card_id, len(body_lines))
    return replace_lines(lines, start, end, block, newline_of(text))


def delete_card(text: str, card_id: str) -> TextEdit:
    """Remove a card and everything it owns."""
    board, lines = _load(text)
    card = _require_card(board, card_id)
    start, end = card_span(lines, card.line_number - 1)
    logger.debug("delete %s lines %d-%d", card_id, start, end)
    return replace_lines(lines, start, end, [], newline_of(text))


def card_block(text: str, card_id: str, status: str | None = None) -> list[str]:
    """A card's lines with its first line in canonical form, for moving elsewhere."""
    if status is not None:
        _require_status(status)
    board, lines = _load(text)
    card = _require_card(board, card_id)
    start, end = card_span(lines, card.line_number - 1)
    return [render_line(card.raw_line, LineFields.from_card(card), status)] + lines[start + 1 : end]


def insert_block(text: str, block: list[str], day: str | None = None, section: str | None = None) -> TextEdit:
    """Append lines to the end of a day or section."""
    if day is not None:
        target, not_found = day, DayNotFound(day)
        valid = is_day(day)
    elif section is not None:
        target, not_found = section, SectionNotFound(section)
        valid = section in SECTION_KEYS
    else:
        raise InvalidValue("target", "")
    lines = split_lines(text)
    destination = insertion_point(lines, target) if valid else None
    if destination is None:
        logger.info("no heading for %s", target)
        raise not_found
    logger.debug("insert %d lines into %s at %d", len(block), target, destination)
    return replace_lines(lines, destination, destination, block, newline_of(text))


def add_card(text: str, title: str, day: str | None = None, section: str | None = None) -> TextEdit:
    """Append ``- [ ] <title>`` to the end of a day or section."""
    title = _clean_title(title)
    return insert_block(text, [f"- [ ] {title}"], day=day, section=section)


COMMANDS = {
    "setStatus": set_status,
    "toggleSubTask": toggle_sub_task,
    "moveToDay": move_to_day,
    "moveToSection": move_to_section,
    "editTitle": edit_title,
    "editDueDate": edit_due_date,
    "editTimeEstimate": edit_time_estimate,
    "setPriority": set_priority,
    "editProject": edit_project,
    "editCard": edit_card,
    "editBody": edit_body,
    "delete": delete_card,
    "add": add_card,
}


def run_command(text: str, name: str, **arguments) -> TextEdit:
    """Dispatch a named command from a rendering layer."""
    operation = COMMANDS.get(name)
    if operation is None:
        raise UnknownCommand(name)
    return operation(text, **arguments)
