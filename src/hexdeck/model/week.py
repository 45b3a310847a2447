"""Move cards between weekly planner files."""

from __future__ import annotations

import datetime
import logging

from hexdeck.model.card import card_block, delete_card, insert_block
from hexdeck.model.document import PlannerFile
from hexdeck.model.errors import InvalidValue
from hexdeck.template import new_week_text, week_start

logger = logging.getLogger(__name__)

ARRIVAL_DAY = "Monday"


def week_file_name(week: int, year: int) -> str:
    """``2026-07-weekly-plan.md``"""
    return f"{year}-{week:02d}-weekly-plan.md"


def next_week(week: int, year: int) -> tuple[int, int]:
    """The ISO week after the given one, rolling over into the next year."""
    following = week_start(week, year) + datetime.timedelta(days=7)
    iso = following.isocalendar()
    return iso[1], iso[0]


def _check_week(week: int, year: int) -> None:
    try:
        week_start(week, year)
    except ValueError:
        raise InvalidValue("week", f"{week}/{year}") from None


def move_to_week(
    source: PlannerFile,
    card_id: str,
    target: PlannerFile,
    week: int,
    year: int,
    status: str | None = None,
    weekdays: int = 5,
) -> str:
    """Move a card and everything it owns to the end of another week's Monday.

    The target planner is created from the week template when missing.
    Both files are locked, in path order, while the edits are computed
    and written. Validation failures leave both untouched. Returns the target
    file's new text.
    """
    _check_week(week, year)
    if source.path == target.path:
        raise InvalidValue("target file", str(target.path))

    first, second = sorted((source, target), key=lambda p: str(p.path))
    with first._lock, second._lock:
        text = source.read()
        block = card_block(text, card_id, status)
        removal = delete_card(text, card_id)

        if target.path.exists():
            target_text = target.read()
        else:
            logger.info("creating %s for week %d of %d", target.path, week, year)
            target_text = new_week_text(week, year, weekdays)
        arrival = insert_block(target_text, block, day=ARRIVAL_DAY)

        target.path.parent.mkdir(parents=True, exist_ok=True)
        new_target = arrival.apply(target_text)
        target.write(new_target)
        source.write(removal.apply(text))

    logger.debug("moved %s to %s", card_id, target.path)
    return new_target
