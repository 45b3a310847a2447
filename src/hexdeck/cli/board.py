"""Handlers for 'hexdeck board' commands."""

from hexdeck.cli._common import open_planner_or_die, output_json
from hexdeck.models import BoardData

LONG_TERM = (
    ("this-quarter", "This Quarter", "this_quarter"),
    ("this-year", "This Year", "this_year"),
    ("parking-lot", "Parking Lot", "parking_lot"),
)


def _plural(count: int) -> str:
    return f"{count} card" if count == 1 else f"{count} cards"


def build_summary(board: BoardData) -> dict:
    """Column summary dicts for a parsed board."""
    fm = board.frontmatter
    return {
        "week": fm.week,
        "year": fm.year,
        "days": [
            {"day": d.day_name, "date": d.date, "line": d.line_number, "cards": len(d.cards)}
            for d in board.days
        ],
        "backlog": [{"key": b.key, "label": b.label, "cards": len(b.cards)} for b in board.backlog],
        "long_term": [
            {"key": key, "label": label, "cards": len(getattr(board, attr))} for key, label, attr in LONG_TERM
        ],
    }


def board_summary(args) -> int:
    """Show week, day columns, backlog buckets and long-term card counts."""
    planner = open_planner_or_die(args)
    summary = build_summary(planner.board())

    if args.json:
        output_json(summary)
        return 0

    print(f"Week {summary['week']}, {summary['year']}")
    for d in summary["days"]:
        date = d["date"] or ""
        print(f"  {d['day']:<10} {date:<11} {_plural(d['cards'])}")
    if summary["backlog"]:
        print("Backlog")
        for b in summary["backlog"]:
            print(f"  {b['label']:<22} {_plural(b['cards'])}")
    for s in summary["long_term"]:
        print(f"{s['label']:<24} {_plural(s['cards'])}")

    return 0


def board_show(args) -> int:
    """Dump the full parsed board."""
    planner = open_planner_or_die(args)
    board = planner.board()

    if args.json:
        output_json(board.to_dict())
        return 0

    for day in board.days:
        print(day.heading)
        for card in day.cards:
            print(f"  {card.id:<9} {card.raw_line}")
    for bucket in board.backlog:
        print(f"Backlog / {bucket.label}")
        for card in bucket.cards:
            print(f"  {card.id:<9} {card.raw_line}")
    for _, label, attr in LONG_TERM:
        cards = getattr(board, attr)
        if cards:
            print(label)
            for card in cards:
                print(f"  {card.id:<9} {card.raw_line}")

    return 0
