"""Tests for 'hexdeck board' commands."""

import json
from argparse import Namespace

import pytest

from hexdeck.cli.board import board_show, board_summary


def test_board_summary(planner_file, capsys):
    args = Namespace(file=str(planner_file), json=False)
    assert board_summary(args) == 0

    out = capsys.readouterr().out
    assert "Week 7, 2026" in out
    assert "Monday" in out
    assert "2026-02-09" in out
    assert "2 cards" in out
    assert "Next 2 Weeks" in out
    assert "Parking Lot" in out


def test_board_summary_json(planner_file, capsys):
    args = Namespace(file=str(planner_file), json=True)
    assert board_summary(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["week"] == 7
    assert [d["cards"] for d in data["days"]] == [2, 1]
    assert data["days"][1]["line"] == 17
    assert data["backlog"][0] == {"key": "now", "label": "Now", "cards": 1}
    assert [s["cards"] for s in data["long_term"]] == [1, 0, 0]


def test_board_show(planner_file, capsys):
    args = Namespace(file=str(planner_file), json=False)
    assert board_show(args) == 0

    out = capsys.readouterr().out
    assert "## Monday" not in out
    assert "Monday, February 9, 2026" in out
    assert "card-10" in out
    assert "Backlog / Now" in out
    assert "This Quarter" in out
    assert "Learn piano" not in out


def test_board_show_json(planner_file, capsys):
    args = Namespace(file=str(planner_file), json=True)
    assert board_show(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["frontmatter"]["tags"] == ["planner", "weekly"]
    assert data["days"][0]["cards"][1]["sub_tasks"][1]["status"] == "in-progress"


def test_missing_file(tmp_path, capsys):
    args = Namespace(file=str(tmp_path / "nope.md"), json=False)
    with pytest.raises(SystemExit, match="1"):
        board_summary(args)
    assert "not found" in capsys.readouterr().err
