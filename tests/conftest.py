"""Shared fixtures: a small weekly planner exercising every section type."""

import pytest

# Line numbers (1-based) referenced by the tests:
#   9 Morning standup   10 Write report (sub-tasks on 12, 13, 15)
#  19 Dentist           29 Fix bike      35 Learn piano (dropped)
#  39 Ship v1
PLANNER = """\
---
week: 7
year: 2026
tags: [planner, weekly]
---

## Monday, February 9, 2026

- [x] Morning standup #work
- [ ] Write report #work [2026-02-12] !! est:2h
  Notes about the report
  - [ ] Outline
  - [/] Draft

  - [x] Review

## Tuesday, February 10, 2026

- [ ] Dentist

## Notes

Some free text.

## Backlog

### Now

- [ ] Fix bike !

### Next 2 Weeks

### Someday

- [ ] Learn piano

## This Quarter

- [ ] Ship v1 #work
"""


@pytest.fixture
def planner_text():
    return PLANNER


@pytest.fixture
def planner_lines():
    return PLANNER.split("\n")


@pytest.fixture
def planner_file(tmp_path):
    """A planner.md in a temporary directory."""
    path = tmp_path / "planner.md"
    path.write_text(PLANNER, encoding="utf-8")
    return path
