"""Parse a planner markdown document into a board.

Parsing happens in two steps: ``classify`` turns each raw line into a
typed ``Line``, and ``BoardBuilder`` runs the section state machine over
the classified lines. Parsing is total; malformed input degrades to
absent fields or dropped cards, never an exception.
"""

import datetime
import logging
import re
from dataclasses import dataclass
from enum import Enum

from hexdeck.frontmatter import read_frontmatter
from hexdeck.metadata import parse_all_metadata
from hexdeck.models import BacklogBucket, BoardData, Card, DaySection, Frontmatter, SubTask

logger = logging.getLogger(__name__)

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

MONTHS = {
    "January": 1,
    "February": 2,
    "March": 3,
    "April": 4,
    "May": 5,
    "June": 6,
    "July": 7,
    "August": 8,
    "September": 9,
    "October": 10,
    "November": 11,
    "December": 12,
}

# Lowercased heading label -> bucket key
BACKLOG_BUCKETS = {
    "now": "now",
    "next 2 weeks": "next-2-weeks",
    "this month": "this-month",
}

CHECKBOX_TO_STATUS = {"x": "done", "/": "in-progress", " ": "todo"}
STATUS_TO_CHECKBOX = {"todo": "[ ]", "in-progress": "[/]", "done": "[x]"}

H2_RE = re.compile(r"^## (.+)$")
H3_RE = re.compile(r"^### (.+)$")
BOLD_RE = re.compile(r"^\*\*.+\*\*$")
CHECKBOX_RE = re.compile(r"^- \[([ x/])\] (.+)$")
INDENTED_CHECKBOX_RE = re.compile(r"^\s+- \[([ x/])\] (.+)$")
DAY_DATE_RE = re.compile(r"(\w+)\s+(\d{1,2}),?\s+(\d{4})")

LINE_SPLIT_RE = re.compile(r"\r?\n")


class LineKind(Enum):
    H2 = "h2"
    H3 = "h3"
    BOLD = "bold"
    CHECKBOX = "checkbox"
    INDENTED_CHECKBOX = "indented-checkbox"
    INDENTED = "indented"
    BLANK = "blank"
    OTHER = "other"


class State(Enum):
    NONE = "none"
    DAY = "day"
    BACKLOG = "backlog"
    THIS_QUARTER = "this-quarter"
    THIS_YEAR = "this-year"
    PARKING_LOT = "parking-lot"


# Lowercased H2 label -> long-lived section state
NAMED_SECTIONS = {
    "backlog": State.BACKLOG,
    "this quarter": State.THIS_QUARTER,
    "this year": State.THIS_YEAR,
    "parking lot": State.PARKING_LOT,
}


@dataclass
class Line:
    """A classified source line.

    ``text`` is the heading text, the checkbox remainder, or the
    de-indented content, depending on ``kind``. ``marker`` is the
    checkbox character for checkbox kinds.
    """

    kind: LineKind
    text: str = ""
    marker: str = ""


def split_lines(text: str) -> list[str]:
    """Split on LF or CRLF."""
    return LINE_SPLIT_RE.split(text)


def classify(line: str) -> Line:
    """Classify one raw line."""
    match = H2_RE.match(line)
    if match:
        return Line(LineKind.H2, match.group(1).strip())
    match = H3_RE.match(line)
    if match:
        return Line(LineKind.H3, match.group(1).strip())
    stripped = line.strip()
    if BOLD_RE.match(stripped):
        return Line(LineKind.BOLD, stripped)
    match = CHECKBOX_RE.match(line)
    if match:
        return Line(LineKind.CHECKBOX, match.group(2), match.group(1))
    if not stripped:
        return Line(LineKind.BLANK)
    if line[0].isspace():
        match = INDENTED_CHECKBOX_RE.match(line)
        if match:
            return Line(LineKind.INDENTED_CHECKBOX, match.group(2), match.group(1))
        return Line(LineKind.INDENTED, line.lstrip())
    return Line(LineKind.OTHER, line)


def day_name_of(heading: str) -> str | None:
    """Return the weekday a heading starts with, if any."""
    for name in DAY_NAMES:
        if heading.startswith(name):
            return name
    return None


def parse_day_date(heading: str) -> str | None:
    """Find a ``Month Day, Year`` date in a heading and return it as ISO."""
    for match in DAY_DATE_RE.finditer(heading):
        month = MONTHS.get(match.group(1).capitalize())
        if month is None:
            continue
        try:
            date = datetime.date(int(match.group(3)), month, int(match.group(2)))
        except ValueError:
            return None
        return date.isoformat()
    return None


class BoardBuilder:
    """Section state machine fed with classified lines."""

    def __init__(self) -> None:
        self.board = BoardData()
        self.state = State.NONE
        self.day: DaySection | None = None
        self.bucket: BacklogBucket | None = None
        self.pending: Card | None = None

    def _target(self) -> list[Card] | None:
        """The list completed cards go to in the current state."""
        if self.state is State.DAY:
            return self.day.cards if self.day else None
        if self.state is State.BACKLOG:
            return self.bucket.cards if self.bucket else None
        if self.state is State.THIS_QUARTER:
            return self.board.this_quarter
        if self.state is State.THIS_YEAR:
            return self.board.this_year
        if self.state is State.PARKING_LOT:
            return self.board.parking_lot
        return None

    def _section_key(self) -> str | None:
        if self.state is State.BACKLOG:
            return self.bucket.key if self.bucket else None
        if self.state in (State.THIS_QUARTER, State.THIS_YEAR, State.PARKING_LOT):
            return self.state.value
        return None

    def flush(self) -> None:
        """Move the pending card into its target list."""
        if self.pending is None:
            return
        target = self._target()
        if target is None:
            logger.debug("dropping %s: no target list in state %s", self.pending.id, self.state.value)
        else:
            target.append(self.pending)
        self.pending = None

    def _enter(self, state: State) -> None:
        self.state = state
        self.day = None
        self.bucket = None

    def _on_h2(self, heading: str, line_number: int) -> None:
        self.flush()
        day_name = day_name_of(heading)
        if day_name:
            self._enter(State.DAY)
            self.day = DaySection(
                heading=heading,
                day_name=day_name,
                line_number=line_number,
                date=parse_day_date(heading),
            )
            self.board.days.append(self.day)
            return
        self._enter(NAMED_SECTIONS.get(heading.lower(), State.NONE))

    def _on_h3(self, label: str, line_number: int) -> None:
        self.flush()
        key = BACKLOG_BUCKETS.get(label.lower())
        if key is None:
            logger.debug("ignoring backlog heading %r on line %d", label, line_number)
            self.bucket = None
            return
        self.bucket = BacklogBucket(label=label, key=key, line_number=line_number)
        self.board.backlog.append(self.bucket)

    def _on_checkbox(self, line: Line, raw: str, line_number: int) -> None:
        self.flush()
        meta = parse_all_metadata(line.text)
        self.pending = Card(
            id=f"card-{line_number}",
            title=meta.clean_title,
            raw_line=raw,
            status=CHECKBOX_TO_STATUS[line.marker],
            line_number=line_number,
            project=meta.project,
            due_date=meta.due_date,
            priority=meta.priority,
            time_estimate=meta.time_estimate,
            day=self.day.day_name if self.state is State.DAY and self.day else None,
            section=self._section_key(),
        )

    def feed(self, line: Line, raw: str, line_number: int) -> None:
        """Advance the state machine by one line (1-based line number)."""
        kind = line.kind
        if kind is LineKind.H2:
            self._on_h2(line.text, line_number)
        elif kind is LineKind.H3 and self.state is State.BACKLOG:
            self._on_h3(line.text, line_number)
        elif kind is LineKind.BOLD or kind is LineKind.BLANK:
            pass
        elif kind is LineKind.CHECKBOX:
            self._on_checkbox(line, raw, line_number)
        elif kind is LineKind.INDENTED_CHECKBOX:
            if self.pending is not None:
                self.pending.sub_tasks.append(
                    SubTask(text=line.text, status=CHECKBOX_TO_STATUS[line.marker], line_number=line_number)
                )
        elif kind is LineKind.INDENTED:
            if self.pending is not None:
                self.pending.body.append(line.text)
        else:
            self.flush()

    def finish(self, frontmatter: Frontmatter | None) -> BoardData:
        self.flush()
        self.board.frontmatter = frontmatter or Frontmatter()
        return self.board


def parse_board(text: str) -> BoardData:
    """Parse a full planner document into a board."""
    lines = split_lines(text)
    frontmatter, body_start = read_frontmatter(lines)
    builder = BoardBuilder()
    for i in range(body_start, len(lines)):
        builder.feed(classify(lines[i]), lines[i], i + 1)
    return builder.finish(frontmatter)
