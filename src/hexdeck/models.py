"""Data models for hexdeck boards."""

from dataclasses import asdict, dataclass, field

STATUSES = ("todo", "in-progress", "done")
PRIORITIES = ("high", "medium", "low")
BACKLOG_SECTIONS = ("now", "next-2-weeks", "this-month")
LONG_TERM_SECTIONS = ("this-quarter", "this-year", "parking-lot")
SECTION_KEYS = BACKLOG_SECTIONS + LONG_TERM_SECTIONS


def _prune(value):
    """Drop None entries from nested dicts so absent fields disappear."""
    if isinstance(value, dict):
        return {k: _prune(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_prune(v) for v in value]
    return value


@dataclass
class Frontmatter:
    """Fenced key/value header of a planner document."""

    week: int = 0
    year: int = 0
    tags: list[str] = field(default_factory=list)
    quarter: str | None = None
    start_date: str | None = None
    end_date: str | None = None


@dataclass
class SubTask:
    """A checkbox nested under a card."""

    text: str
    status: str
    line_number: int


@dataclass
class Card:
    """One task: a checkbox line plus its indented continuation.

    ``id`` encodes the 1-based source line, so it is only meaningful
    against the text it was parsed from.
    """

    id: str
    title: str
    raw_line: str
    status: str
    line_number: int
    body: list[str] = field(default_factory=list)
    sub_tasks: list[SubTask] = field(default_factory=list)
    project: str | None = None
    due_date: str | None = None
    priority: str | None = None
    time_estimate: str | None = None
    day: str | None = None
    section: str | None = None


@dataclass
class DaySection:
    """A ``## Monday, February 9, 2026`` column."""

    heading: str
    day_name: str
    line_number: int
    date: str | None = None
    cards: list[Card] = field(default_factory=list)


@dataclass
class BacklogBucket:
    """A ``### Now`` style subsection of the backlog."""

    label: str
    key: str
    line_number: int
    cards: list[Card] = field(default_factory=list)


@dataclass
class BoardData:
    """The whole parsed document."""

    frontmatter: Frontmatter = field(default_factory=Frontmatter)
    days: list[DaySection] = field(default_factory=list)
    backlog: list[BacklogBucket] = field(default_factory=list)
    this_quarter: list[Card] = field(default_factory=list)
    this_year: list[Card] = field(default_factory=list)
    parking_lot: list[Card] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Plain dict form, with absent optional fields omitted."""
        return _prune(asdict(self))


def all_cards(board: BoardData) -> list[Card]:
    """Collect every card: days, backlog buckets, then long-term lists."""
    cards: list[Card] = []
    for day in board.days:
        cards.extend(day.cards)
    for bucket in board.backlog:
        cards.extend(bucket.cards)
    cards.extend(board.this_quarter)
    cards.extend(board.this_year)
    cards.extend(board.parking_lot)
    return cards


def find_card(board: BoardData, card_id: str) -> Card | None:
    """Find a card by id, or None."""
    for card in all_cards(board):
        if card.id == card_id:
            return card
    return None


def card_to_dict(card: Card) -> dict:
    """Plain dict form of a single card."""
    return _prune(asdict(card))
