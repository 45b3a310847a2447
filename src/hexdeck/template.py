"""Generate an empty planner document for an ISO week."""

import datetime

import yaml

from hexdeck.parser import DAY_NAMES, MONTHS

MONTH_NAMES = {number: name for name, number in MONTHS.items()}

TAGS = ["planner", "weekly"]

LAYOUT = [
    "## Backlog",
    "### Now",
    "### Next 2 Weeks",
    "### This Month",
    "## This Quarter",
    "## This Year",
    "## Parking Lot",
]


def week_start(week: int, year: int) -> datetime.date:
    """Monday of an ISO week."""
    return datetime.date.fromisocalendar(year, week, 1)


def day_heading(date: datetime.date) -> str:
    """``## Monday, February 9, 2026``"""
    return f"## {DAY_NAMES[date.weekday()]}, {MONTH_NAMES[date.month]} {date.day}, {date.year}"


def new_week_text(week: int, year: int, weekdays: int = 5) -> str:
    """Planner text with frontmatter, day columns, backlog and long-term sections."""
    if not 1 <= week <= 53:
        raise ValueError(f"week must be 1-53, got {week}")
    if not 1 <= weekdays <= 7:
        raise ValueError(f"weekdays must be 1-7, got {weekdays}")
    start = week_start(week, year)
    meta = {
        "week": week,
        "year": year,
        "quarter": f"Q{(start.month - 1) // 3 + 1}",
        "startDate": start,
        "endDate": start + datetime.timedelta(days=6),
        "tags": TAGS,
    }
    headings = [day_heading(start + datetime.timedelta(days=i)) for i in range(weekdays)] + LAYOUT

    parts = ["---", yaml.dump(meta, default_flow_style=None, sort_keys=False).rstrip(), "---", ""]
    for heading in headings:
        parts.append(heading)
        parts.append("")
    return "\n".join(parts)
