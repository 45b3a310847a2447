"""Rebuild a task line from its fields in canonical order."""

import re
from dataclasses import dataclass

from hexdeck.metadata import PRIORITY_TO_MARKER
from hexdeck.models import Card
from hexdeck.parser import STATUS_TO_CHECKBOX

PREFIX_RE = re.compile(r"^(\s*-\s*)(\[[ xX/]\])\s*")


@dataclass(frozen=True)
class LineFields:
    """The editable parts of a task line."""

    title: str
    project: str | None = None
    due_date: str | None = None
    priority: str | None = None
    time_estimate: str | None = None

    @classmethod
    def from_card(cls, card: Card) -> "LineFields":
        return cls(
            title=card.title,
            project=card.project,
            due_date=card.due_date,
            priority=card.priority,
            time_estimate=card.time_estimate,
        )

    def tokens(self) -> list[str]:
        """Title then metadata tokens, absent fields skipped."""
        parts = [self.title] if self.title else []
        if self.project:
            parts.append(f"#{self.project}")
        if self.due_date:
            parts.append(f"[{self.due_date}]")
        if self.priority:
            parts.append(PRIORITY_TO_MARKER[self.priority])
        if self.time_estimate:
            parts.append(f"est:{self.time_estimate}")
        return parts


def checkbox_prefix(raw_line: str, status: str | None = None) -> str:
    """The ``- [ ] `` prefix of a line, with the checkbox optionally swapped."""
    match = PREFIX_RE.match(raw_line)
    if not match:
        indent = raw_line[: len(raw_line) - len(raw_line.lstrip())]
        return f"{indent}- {STATUS_TO_CHECKBOX[status or 'todo']} "
    checkbox = STATUS_TO_CHECKBOX[status] if status else match.group(2)
    return f"{match.group(1)}{checkbox} "


def render_line(raw_line: str, fields: LineFields, status: str | None = None) -> str:
    """Render ``<prefix><title> #project [due] !!! est:2h``."""
    return checkbox_prefix(raw_line, status) + " ".join(fields.tokens())
