"""Tests for moving cards between week files."""

import pytest

from hexdeck.model import (
    CardNotFound,
    DayNotFound,
    InvalidValue,
    PlannerFile,
    move_to_week,
    next_week,
    week_file_name,
)
from hexdeck.parser import parse_board

REPORT_BLOCK = (
    "- [ ] Write report #work [2026-02-12] !! est:2h\n"
    "  Notes about the report\n"
    "  - [ ] Outline\n"
    "  - [/] Draft\n"
    "\n"
    "  - [x] Review\n"
)

WEEK_8 = "---\nweek: 8\nyear: 2026\ntags: [planner]\n---\n## Monday\n- [ ] Plan sprint\n\n## Tuesday\n"


def test_week_file_name():
    assert week_file_name(7, 2026) == "2026-07-weekly-plan.md"
    assert week_file_name(12, 2026) == "2026-12-weekly-plan.md"


@pytest.mark.parametrize(
    "week,year,after",
    [
        (7, 2026, (8, 2026)),
        (52, 2025, (1, 2026)),
        (53, 2026, (1, 2027)),
    ],
)
def test_next_week(week, year, after):
    assert next_week(week, year) == after


def test_move_creates_target(planner_file, planner_text, tmp_path):
    source = PlannerFile(planner_file)
    target = PlannerFile(tmp_path / "weeks" / "2026-08-weekly-plan.md")
    new = move_to_week(source, "card-10", target, 8, 2026)

    assert "## Monday, February 16, 2026\n" + REPORT_BLOCK in new
    assert target.read() == new
    board = parse_board(new)
    assert board.frontmatter.week == 8
    (report,) = board.days[0].cards
    assert report.title == "Write report"
    assert [s.text for s in report.sub_tasks] == ["Outline", "Draft", "Review"]
    assert source.read() == planner_text.replace(REPORT_BLOCK, "")


def test_move_into_existing_week(planner_file, planner_text, tmp_path):
    path = tmp_path / "2026-08-weekly-plan.md"
    path.write_text(WEEK_8, encoding="utf-8")
    move_to_week(PlannerFile(planner_file), "card-19", PlannerFile(path), 8, 2026, status="done")

    assert path.read_text() == WEEK_8.replace("- [ ] Plan sprint\n", "- [ ] Plan sprint\n- [x] Dentist\n")
    assert planner_file.read_text() == planner_text.replace("- [ ] Dentist\n", "")


def test_move_missing_card_writes_nothing(planner_file, planner_text, tmp_path):
    target = tmp_path / "2026-08-weekly-plan.md"
    with pytest.raises(CardNotFound):
        move_to_week(PlannerFile(planner_file), "card-2", PlannerFile(target), 8, 2026)
    assert not target.exists()
    assert planner_file.read_text() == planner_text


def test_move_bad_week(planner_file, tmp_path):
    with pytest.raises(InvalidValue, match="week"):
        move_to_week(PlannerFile(planner_file), "card-19", PlannerFile(tmp_path / "x.md"), 53, 2025)


def test_move_to_same_file(planner_file):
    planner = PlannerFile(planner_file)
    with pytest.raises(InvalidValue):
        move_to_week(planner, "card-19", PlannerFile(planner_file), 8, 2026)


def test_target_without_monday(planner_file, planner_text, tmp_path):
    path = tmp_path / "2026-08-weekly-plan.md"
    path.write_text("## Tuesday\n", encoding="utf-8")
    with pytest.raises(DayNotFound):
        move_to_week(PlannerFile(planner_file), "card-19", PlannerFile(path), 8, 2026)
    assert path.read_text() == "## Tuesday\n"
    assert planner_file.read_text() == planner_text
