"""CLI argument parser and dispatch for hexdeck."""

import argparse

from hexdeck.cli.board import board_show, board_summary
from hexdeck.cli.card import (
    card_add,
    card_body,
    card_delete,
    card_get,
    card_list,
    card_move,
    card_set,
    card_status,
    subtask_toggle,
)
from hexdeck.cli.week import week_new
from hexdeck.models import SECTION_KEYS, STATUSES


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--file", "-f", default=None, help="Planner markdown file (default: hexdeck.file or planner.md)")
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="count", default=0, help="Log to stderr (-vv for debug)")

    parser = argparse.ArgumentParser(
        prog="hexdeck",
        description="Kanban board over a weekly markdown planner",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- board ---
    board_p = nouns.add_parser("board", help="Board operations", parents=[common])
    board_verbs = board_p.add_subparsers(dest="verb")

    board_summary_p = board_verbs.add_parser("summary", help="Show board summary", parents=[common])
    board_summary_p.set_defaults(func=board_summary)

    board_show_p = board_verbs.add_parser("show", help="Show every parsed card", parents=[common])
    board_show_p.set_defaults(func=board_show)

    # board with no verb = summary
    board_p.set_defaults(func=board_summary)

    # --- card ---
    card_p = nouns.add_parser("card", help="Card operations", parents=[common])
    card_verbs = card_p.add_subparsers(dest="verb")

    card_list_p = card_verbs.add_parser("list", help="List cards", parents=[common])
    card_list_p.add_argument("--day", help="Only cards on this day")
    card_list_p.add_argument("--section", choices=SECTION_KEYS, help="Only cards in this section")
    card_list_p.set_defaults(func=card_list)

    card_get_p = card_verbs.add_parser("get", help="Show one card", parents=[common])
    card_get_p.add_argument("id", help="Card ID (card-<line>)")
    card_get_p.set_defaults(func=card_get)

    card_add_p = card_verbs.add_parser("add", help="Add a card", parents=[common])
    card_add_p.add_argument("title", help="Card text, metadata tags allowed")
    add_target = card_add_p.add_mutually_exclusive_group()
    add_target.add_argument("--day", help="Target day")
    add_target.add_argument("--section", choices=SECTION_KEYS, help="Target section (default: hexdeck.add-section)")
    card_add_p.set_defaults(func=card_add)

    card_status_p = card_verbs.add_parser("status", help="Set card status", parents=[common])
    card_status_p.add_argument("id", help="Card ID")
    card_status_p.add_argument("status", help=f"One of: {', '.join(STATUSES)}")
    card_status_p.set_defaults(func=card_status)

    card_move_p = card_verbs.add_parser("move", help="Move a card", parents=[common])
    card_move_p.add_argument("id", help="Card ID")
    move_target = card_move_p.add_mutually_exclusive_group(required=True)
    move_target.add_argument("--day", help="Target day")
    move_target.add_argument("--section", choices=SECTION_KEYS, help="Target section")
    move_target.add_argument("--week", type=int, help="Target ISO week; the card lands on its Monday")
    move_target.add_argument("--next-week", action="store_true", help="Move to the week after this planner's")
    card_move_p.add_argument("--year", type=int, help="Year for --week (default: this planner's)")
    card_move_p.add_argument("--status", help="New status while moving")
    card_move_p.set_defaults(func=card_move)

    card_set_p = card_verbs.add_parser("set", help="Edit card fields (empty value clears)", parents=[common])
    card_set_p.add_argument("id", help="Card ID")
    card_set_p.add_argument("--title", help="New title")
    card_set_p.add_argument("--due", help="Due date YYYY-MM-DD")
    card_set_p.add_argument("--estimate", help="Time estimate, e.g. 2h or 30m")
    card_set_p.add_argument("--priority", help="high, medium or low")
    card_set_p.add_argument("--project", help="Project tag")
    card_set_p.set_defaults(func=card_set)

    card_body_p = card_verbs.add_parser("body", help="Replace card body from stdin", parents=[common])
    card_body_p.add_argument("id", help="Card ID")
    card_body_p.set_defaults(func=card_body)

    card_delete_p = card_verbs.add_parser("delete", help="Delete a card", parents=[common])
    card_delete_p.add_argument("id", help="Card ID")
    card_delete_p.set_defaults(func=card_delete)

    # card with no verb = list
    card_p.set_defaults(func=card_list, day=None, section=None)

    # --- subtask ---
    sub_p = nouns.add_parser("subtask", help="Sub-task operations", parents=[common])
    sub_verbs = sub_p.add_subparsers(dest="verb")

    sub_toggle_p = sub_verbs.add_parser("toggle", help="Cycle a sub-task checkbox", parents=[common])
    sub_toggle_p.add_argument("line", type=int, help="1-based line number of the sub-task")
    sub_toggle_p.set_defaults(func=subtask_toggle)

    # --- week ---
    week_p = nouns.add_parser("week", help="Week operations", parents=[common])
    week_verbs = week_p.add_subparsers(dest="verb")

    week_new_p = week_verbs.add_parser("new", help="Create a planner for a week", parents=[common])
    week_new_p.add_argument("--week", type=int, help="ISO week (default: this week)")
    week_new_p.add_argument("--year", type=int, help="ISO year (default: this year)")
    week_new_p.add_argument("--force", action="store_true", help="Overwrite an existing file")
    week_new_p.set_defaults(func=week_new)

    return parser
