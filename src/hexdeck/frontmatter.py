"""Read the fenced key/value header at the top of a planner document."""

import datetime
import re

import yaml

from hexdeck.models import Frontmatter

FENCE = "---"

_KEY_VALUE = re.compile(r"^(\w[\w-]*):\s*(.*)$")

# Accepted spellings for the optional fields
_OPTIONAL_KEYS = {
    "quarter": "quarter",
    "startDate": "start_date",
    "start_date": "start_date",
    "endDate": "end_date",
    "end_date": "end_date",
}

_PLANNER_KEYS = ("week", "year", "tags")


def _closing_fence(lines: list[str]) -> int | None:
    """Index of the closing fence, or None if the document has no header."""
    if not lines or lines[0].strip() != FENCE:
        return None
    for i in range(1, len(lines)):
        if lines[i].strip() == FENCE:
            return i
    return None


def _scalar(raw: str):
    """Read a value as a YAML scalar, falling back to the raw string."""
    if not raw:
        return raw
    try:
        value = yaml.safe_load(raw)
    except (yaml.YAMLError, ValueError, KeyError, AttributeError, TypeError):
        # explicit tags such as !!int abc fail outside YAMLError
        return raw
    return raw if value is None else value


def _to_int(value) -> int:
    if isinstance(value, bool):
        return 0
    try:
        if isinstance(value, (int, float)):
            return int(value)
        return int(str(value).strip())
    except (ValueError, OverflowError):
        return 0


def _to_str(value) -> str:
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return str(value)


def _text(raw: str) -> str:
    """A free-text field. YAML strings and dates are kept, anything else stays raw."""
    value = _scalar(raw)
    if isinstance(value, (str, datetime.date)):
        return _to_str(value)
    return raw


def parse_tags(value) -> list[str]:
    """Parse ``[a, b]`` or ``a, b`` into a list of non-empty strings."""
    if value is None or value == "":
        return []
    if isinstance(value, list):
        items = [_to_str(v) for v in value if v is not None]
    else:
        inner = str(value).strip()
        if inner.startswith("[") and inner.endswith("]"):
            inner = inner[1:-1]
        items = inner.split(",")
    return [s.strip() for s in items if s.strip()]


def read_raw_frontmatter(lines: list[str]) -> tuple[dict[str, str] | None, int]:
    """Return (raw key/value strings, body start line).

    The dict is None when the document has no complete header.
    """
    end = _closing_fence(lines)
    if end is None:
        return None, 0
    raw: dict[str, str] = {}
    for line in lines[1:end]:
        match = _KEY_VALUE.match(line)
        if match:
            raw[match.group(1)] = match.group(2).strip()
    return raw, end + 1


def read_frontmatter(lines: list[str]) -> tuple[Frontmatter | None, int]:
    """Parse the header from a document's lines.

    Returns (frontmatter, body_start_line). A missing or unterminated
    fence gives (None, 0); it is never an error.
    """
    raw, body_start = read_raw_frontmatter(lines)
    if raw is None:
        return None, 0

    frontmatter = Frontmatter(
        week=_to_int(_scalar(raw.get("week", ""))),
        year=_to_int(_scalar(raw.get("year", ""))),
        tags=parse_tags(_scalar(raw.get("tags", ""))),
    )
    for key, attr in _OPTIONAL_KEYS.items():
        value = raw.get(key)
        if value and getattr(frontmatter, attr) is None:
            setattr(frontmatter, attr, _text(value))
    return frontmatter, body_start


def is_planner_text(text: str) -> bool:
    """True if the text starts with a header carrying week, year and tags."""
    raw, _ = read_raw_frontmatter(re.split(r"\r?\n", text))
    if raw is None:
        return False
    return all(key in raw for key in _PLANNER_KEYS)
