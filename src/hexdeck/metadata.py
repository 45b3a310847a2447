"""Extract inline metadata tags from a task's text.

Each extractor returns (value, clean_text). Extraction is destructive:
the matched token is removed and whitespace is collapsed, so running
all four in sequence leaves the bare title.
"""

import re
from dataclasses import dataclass

PROJECT_RE = re.compile(r"(?:^|\s)#([A-Za-z0-9_-]+)")
BRACKET_DATE_RE = re.compile(r"\[(\d{4}-\d{2}-\d{2})\]")
DUE_PREFIX_RE = re.compile(r"due:(\d{4}-\d{2}-\d{2})")
EST_RE = re.compile(r"est:(\d+[hm])")
STOPWATCH_RE = re.compile("⏱️?\\s*(\\d+[hm])")

# Longest first; a marker never borders another "!" or follows a letter
PRIORITY_MARKERS = (
    ("high", re.compile(r"(?<![A-Za-z!])!!!(?!!)")),
    ("medium", re.compile(r"(?<![A-Za-z!])!!(?!!)")),
    ("low", re.compile(r"(?<![A-Za-z!])!(?!!)")),
)

PRIORITY_TO_MARKER = {"high": "!!!", "medium": "!!", "low": "!"}

_SPACES = re.compile(r"\s{2,}")


@dataclass
class ExtractedMetadata:
    """Result of running every extractor over a task's text."""

    clean_title: str
    project: str | None = None
    due_date: str | None = None
    priority: str | None = None
    time_estimate: str | None = None


def _remove(text: str, match: re.Match) -> str:
    """Cut a match out of text and tidy the whitespace left behind."""
    text = text[: match.start()] + text[match.end() :]
    return _SPACES.sub(" ", text).strip()


def extract_project(text: str) -> tuple[str | None, str]:
    """Extract the first #project tag."""
    match = PROJECT_RE.search(text)
    if not match:
        return None, text
    return match.group(1), _remove(text, match)


def extract_due_date(text: str) -> tuple[str | None, str]:
    """Extract a due date: ``[YYYY-MM-DD]`` or ``due:YYYY-MM-DD``."""
    for pattern in (BRACKET_DATE_RE, DUE_PREFIX_RE):
        match = pattern.search(text)
        if match:
            return match.group(1), _remove(text, match)
    return None, text


def extract_priority(text: str) -> tuple[str | None, str]:
    """Extract priority: ``!!!`` high, ``!!`` medium, ``!`` low."""
    for priority, pattern in PRIORITY_MARKERS:
        match = pattern.search(text)
        if match:
            return priority, _remove(text, match)
    return None, text


def extract_time_estimate(text: str) -> tuple[str | None, str]:
    """Extract a time estimate: ``est:2h``, ``est:30m`` or ``⏱️ 2h``."""
    for pattern in (EST_RE, STOPWATCH_RE):
        match = pattern.search(text)
        if match:
            return match.group(1), _remove(text, match)
    return None, text


def parse_all_metadata(text: str) -> ExtractedMetadata:
    """Run all extractors in sequence: project, due date, priority, estimate."""
    project, text = extract_project(text)
    due_date, text = extract_due_date(text)
    priority, text = extract_priority(text)
    time_estimate, text = extract_time_estimate(text)
    return ExtractedMetadata(
        clean_title=text.strip(),
        project=project,
        due_date=due_date,
        priority=priority,
        time_estimate=time_estimate,
    )
