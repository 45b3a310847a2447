"""Tests for planner parsing."""

import re

import pytest

from hexdeck.models import all_cards, card_to_dict, find_card
from hexdeck.parser import LineKind, classify, parse_board, parse_day_date


def test_classify():
    assert classify("## Monday").kind is LineKind.H2
    assert classify("## Monday").text == "Monday"
    assert classify("### Now").kind is LineKind.H3
    assert classify("**Work**").kind is LineKind.BOLD
    assert classify("  **Work**  ").kind is LineKind.BOLD
    assert classify("   ").kind is LineKind.BLANK
    assert classify("text").kind is LineKind.OTHER


def test_classify_checkboxes():
    line = classify("- [x] done")
    assert (line.kind, line.marker, line.text) == (LineKind.CHECKBOX, "x", "done")
    line = classify("  - [/] sub")
    assert (line.kind, line.marker, line.text) == (LineKind.INDENTED_CHECKBOX, "/", "sub")
    assert classify("- [X] upper").kind is LineKind.OTHER


def test_classify_indented():
    line = classify("\tnote")
    assert line.kind is LineKind.INDENTED
    assert line.text == "note"


def test_parse_day_date():
    assert parse_day_date("Monday, February 9, 2026") == "2026-02-09"
    assert parse_day_date("Friday, march 13 2026") == "2026-03-13"
    assert parse_day_date("Monday, February 30, 2026") is None
    assert parse_day_date("Monday (holiday)") is None


def test_week_example():
    text = "---\nweek: 7\nyear: 2026\ntags: [planner, weekly]\n---\n\n## Monday, February 9, 2026\n\n- [x] Morning standup #work\n"
    board = parse_board(text)
    assert board.frontmatter.week == 7
    assert board.frontmatter.tags == ["planner", "weekly"]
    assert len(board.days) == 1
    day = board.days[0]
    assert day.day_name == "Monday"
    assert day.date == "2026-02-09"
    (card,) = day.cards
    assert re.fullmatch(r"card-\d+", card.id)
    assert card.title == "Morning standup"
    assert card.status == "done"
    assert card.project == "work"
    assert card.day == "Monday"


def test_full_planner(planner_text):
    board = parse_board(planner_text)
    monday, tuesday = board.days
    assert monday.line_number == 7
    assert [c.id for c in monday.cards] == ["card-9", "card-10"]
    assert [c.id for c in tuesday.cards] == ["card-19"]
    assert tuesday.date == "2026-02-10"

    report = monday.cards[1]
    assert report.title == "Write report"
    assert report.raw_line == "- [ ] Write report #work [2026-02-12] !! est:2h"
    assert report.priority == "medium"
    assert report.body == ["Notes about the report"]
    assert [(s.text, s.status, s.line_number) for s in report.sub_tasks] == [
        ("Outline", "todo", 12),
        ("Draft", "in-progress", 13),
        ("Review", "done", 15),
    ]


def test_backlog_buckets(planner_text):
    board = parse_board(planner_text)
    assert [(b.label, b.key) for b in board.backlog] == [("Now", "now"), ("Next 2 Weeks", "next-2-weeks")]
    (bike,) = board.backlog[0].cards
    assert bike.title == "Fix bike"
    assert bike.priority == "low"
    assert bike.section == "now"
    assert bike.day is None
    assert board.backlog[1].cards == []


def test_unknown_backlog_bucket_drops_cards(planner_text):
    board = parse_board(planner_text)
    assert find_card(board, "card-35") is None
    assert "Learn piano" not in [c.title for c in all_cards(board)]


def test_long_term_sections():
    text = "## This Quarter\n- [ ] a\n## This Year\n- [/] b\n## Parking Lot\n- [ ] c\n"
    board = parse_board(text)
    assert [c.title for c in board.this_quarter] == ["a"]
    assert [c.section for c in board.this_year] == ["this-year"]
    assert board.this_year[0].status == "in-progress"
    assert [c.section for c in board.parking_lot] == ["parking-lot"]


def test_section_headings_are_case_insensitive():
    board = parse_board("## BACKLOG\n### NOW\n- [ ] x\n")
    (bucket,) = board.backlog
    assert bucket.label == "NOW"
    assert bucket.key == "now"
    assert [c.title for c in bucket.cards] == ["x"]


def test_card_outside_sections_dropped():
    board = parse_board("- [ ] orphan\n## Notes\n- [ ] also orphan\n## Monday\n")
    assert all_cards(board) == []
    assert len(board.days) == 1


def test_bold_lines_skipped():
    board = parse_board("## Monday\n**Work**\n- [ ] a\n")
    assert [c.title for c in board.days[0].cards] == ["a"]


def test_unindented_text_ends_card():
    board = parse_board("## Monday\n- [ ] a\nplain\n  stray\n")
    (card,) = board.days[0].cards
    assert card.body == []


def test_h3_outside_backlog_ends_card():
    board = parse_board("## Monday\n- [ ] a\n### Work\n- [ ] b\n  note\n")
    a, b = board.days[0].cards
    assert a.body == []
    assert b.body == ["note"]


def test_missing_frontmatter():
    board = parse_board("## Monday\n")
    assert board.frontmatter.week == 0
    assert board.frontmatter.tags == []


def test_crlf(planner_text):
    board = parse_board(planner_text.replace("\n", "\r\n"))
    report = find_card(board, "card-10")
    assert report.raw_line.endswith("est:2h")
    assert report.body == ["Notes about the report"]
    assert board.frontmatter.week == 7


@pytest.mark.parametrize(
    "text",
    [
        "",
        "---",
        "---\n",
        "##",
        "### Now\n- [ ] x",
        "\x00\n- [ ] \n",
        "---\nweek: inf\n---\n",
        "## Monday, Februar 30, 2026",
        "---\nweek: !!int abc\nyear: 2026\n---\n## Monday\n- [ ] a\n",
        "---\nweek: !!float abc\n---\n",
        "---\nyear: !!timestamp abc\n---\n",
        "---\ntags: !!bool maybe\nquarter: !!int Q1\n---\n",
    ],
)
def test_parse_never_raises(text):
    parse_board(text)


def test_to_dict_omits_absent_fields(planner_text):
    board = parse_board(planner_text)
    data = board.to_dict()
    standup = data["days"][0]["cards"][0]
    assert "due_date" not in standup
    assert standup["project"] == "work"
    assert "quarter" not in data["frontmatter"]


def test_card_to_dict(planner_text):
    card = find_card(parse_board(planner_text), "card-29")
    data = card_to_dict(card)
    assert data["section"] == "now"
    assert "day" not in data
