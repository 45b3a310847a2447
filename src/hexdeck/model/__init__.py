"""Text surgery: spans, canonical lines and card mutations."""

from hexdeck.model.card import (
    COMMANDS,
    add_card,
    card_block,
    delete_card,
    edit_body,
    edit_card,
    edit_due_date,
    edit_project,
    edit_time_estimate,
    edit_title,
    insert_block,
    move_to_day,
    move_to_section,
    run_command,
    set_priority,
    set_status,
    toggle_sub_task,
)
from hexdeck.model.document import PlannerFile
from hexdeck.model.edit import TextEdit, relocate
from hexdeck.model.errors import (
    CardNotFound,
    DayNotFound,
    InvalidStatus,
    InvalidValue,
    MutationError,
    SectionNotFound,
    SubTaskNotFound,
    UnknownCommand,
)
from hexdeck.model.line import LineFields, render_line
from hexdeck.model.span import card_span, insertion_point
from hexdeck.model.week import move_to_week, next_week, week_file_name

__all__ = [
    "COMMANDS",
    "CardNotFound",
    "DayNotFound",
    "InvalidStatus",
    "InvalidValue",
    "LineFields",
    "MutationError",
    "PlannerFile",
    "SectionNotFound",
    "SubTaskNotFound",
    "TextEdit",
    "UnknownCommand",
    "add_card",
    "card_block",
    "card_span",
    "delete_card",
    "edit_body",
    "edit_card",
    "edit_due_date",
    "edit_project",
    "edit_time_estimate",
    "edit_title",
    "insert_block",
    "insertion_point",
    "move_to_day",
    "move_to_section",
    "move_to_week",
    "next_week",
    "relocate",
    "render_line",
    "run_command",
    "set_priority",
    "set_status",
    "toggle_sub_task",
    "week_file_name",
]
