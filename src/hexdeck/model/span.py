"""Locate card spans and section insertion points in a document's lines.

All indices here are 0-based.
"""

import re

from hexdeck.models import BACKLOG_SECTIONS, LONG_TERM_SECTIONS
from hexdeck.parser import DAY_NAMES, day_name_of

HEADING_RE = re.compile(r"^(#{1,6}) (.*)$")

# Section key -> (heading level, lowercased label)
SECTION_HEADINGS = {
    "now": (3, "now"),
    "next-2-weeks": (3, "next 2 weeks"),
    "this-month": (3, "this month"),
    "this-quarter": (2, "this quarter"),
    "this-year": (2, "this year"),
    "parking-lot": (2, "parking lot"),
}

BACKLOG_LABEL = "backlog"


def indent_of(line: str) -> int:
    """Length of the leading whitespace."""
    return len(line) - len(line.lstrip())


def heading_of(line: str) -> tuple[int, str] | None:
    """Return (level, text) for a markdown heading line."""
    match = HEADING_RE.match(line)
    if not match:
        return None
    return len(match.group(1)), match.group(2).strip()


def card_span(lines: list[str], anchor: int) -> tuple[int, int]:
    """Half-open range of the card on line ``anchor`` and everything it owns.

    A following line belongs to the card while it is indented deeper
    than the anchor. Blank lines belong only when the next non-blank
    line is still deeper.
    """
    depth = indent_of(lines[anchor])
    end = anchor + 1
    i = anchor + 1
    while i < len(lines):
        if lines[i].strip():
            if indent_of(lines[i]) <= depth:
                break
            i += 1
            end = i
            continue
        j = i + 1
        while j < len(lines) and not lines[j].strip():
            j += 1
        if j >= len(lines) or indent_of(lines[j]) <= depth:
            break
        i = j
    return anchor, end


def _day_heading(lines: list[str], day: str) -> int | None:
    wanted = day.strip().lower()
    for i, line in enumerate(lines):
        heading = heading_of(line)
        if heading and heading[0] == 2:
            name = day_name_of(heading[1])
            if name and name.lower() == wanted:
                return i
    return None


def _section_heading(lines: list[str], section: str) -> int | None:
    level, label = SECTION_HEADINGS[section]
    in_backlog = False
    for i, line in enumerate(lines):
        heading = heading_of(line)
        if heading is None:
            continue
        h_level, text = heading
        if h_level <= 2:
            in_backlog = h_level == 2 and text.lower() == BACKLOG_LABEL
        if h_level != level or text.lower() != label:
            continue
        if level == 3 and not in_backlog:
            continue
        return i
    return None


def section_end(lines: list[str], heading_index: int, level: int) -> int:
    """Index just after the last non-blank line under a heading.

    The section ends at the next heading of the same or a higher level.
    """
    insert_at = heading_index + 1
    for i in range(heading_index + 1, len(lines)):
        heading = heading_of(lines[i])
        if heading and heading[0] <= level:
            break
        if lines[i].strip():
            insert_at = i + 1
    return insert_at


def is_day(target: str) -> bool:
    return target.strip().capitalize() in DAY_NAMES


def is_section(target: str) -> bool:
    return target in BACKLOG_SECTIONS or target in LONG_TERM_SECTIONS


def insertion_point(lines: list[str], target: str) -> int | None:
    """Line index where new content for a day or section key belongs.

    Returns None if no heading matches; callers must not guess.
    """
    if is_section(target):
        index = _section_heading(lines, target)
        level = SECTION_HEADINGS[target][0]
    elif is_day(target):
        index = _day_heading(lines, target)
        level = 2
    else:
        return None
    if index is None:
        return None
    return section_end(lines, index, level)
