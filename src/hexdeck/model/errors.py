"""Mutation failure kinds.

Every failure is raised before an edit is produced, so the document
is never partially changed.
"""


class MutationError(ValueError):
    """Base class for a mutation that cannot be applied."""


class CardNotFound(MutationError):
    """The card id is absent from a fresh parse of the document."""

    def __init__(self, card_id: str):
        self.card_id = card_id
        super().__init__(f"Card not found: {card_id}")


class SubTaskNotFound(MutationError):
    """The line is not a sub-task checkbox."""

    def __init__(self, line_number: int):
        self.line_number = line_number
        super().__init__(f"No sub-task on line {line_number}")


class SectionNotFound(MutationError):
    """No heading matches the section key."""

    def __init__(self, section: str):
        self.section = section
        super().__init__(f"Could not find section: {section}")


class DayNotFound(MutationError):
    """No day heading matches the day name."""

    def __init__(self, day: str):
        self.day = day
        super().__init__(f"Could not find {day} section")


class InvalidStatus(MutationError):
    """Status outside todo / in-progress / done."""

    def __init__(self, status: str):
        self.status = status
        super().__init__(f"Invalid status: {status}")


class InvalidValue(MutationError):
    """A field value that cannot be written back as a marker."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value!r}")


class UnknownCommand(MutationError):
    """A command name with no matching operation."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown command: {name}")
