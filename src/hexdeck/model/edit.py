"""Text edits produced by mutations, and pure line-list helpers."""

from dataclasses import dataclass

from hexdeck.parser import LINE_SPLIT_RE, split_lines


@dataclass(frozen=True)
class TextEdit:
    """Replace the range (start_line, start_column)..(end_line, end_column).

    Lines and columns are 0-based over the document split on line breaks;
    the end position is exclusive.
    """

    start_line: int
    start_column: int
    end_line: int
    end_column: int
    text: str

    @classmethod
    def whole(cls, document: str, new_text: str) -> "TextEdit":
        """An edit replacing the entire document."""
        lines = split_lines(document)
        return cls(0, 0, len(lines) - 1, len(lines[-1]), new_text)

    def apply(self, document: str) -> str:
        """Return the document with this edit applied."""
        starts = [0] + [m.end() for m in LINE_SPLIT_RE.finditer(document)]
        begin = starts[self.start_line] + self.start_column
        end = starts[self.end_line] + self.end_column
        return document[:begin] + self.text + document[end:]


def newline_of(document: str) -> str:
    """The line break a document uses."""
    return "\r\n" if "\r\n" in document else "\n"


def replace_lines(lines: list[str], lo: int, hi: int, new_lines: list[str], newline: str = "\n") -> TextEdit:
    """Edit replacing lines[lo:hi] with new_lines.

    Deleting a range that reaches the end of the document consumes the
    preceding line break instead of the following one.
    """
    if new_lines and hi > lo:
        return TextEdit(lo, 0, hi - 1, len(lines[hi - 1]), newline.join(new_lines))
    if new_lines:
        # Pure insertion before line lo
        if lo < len(lines):
            return TextEdit(lo, 0, lo, 0, newline.join(new_lines) + newline)
        last = len(lines) - 1
        return TextEdit(last, len(lines[last]), last, len(lines[last]), newline + newline.join(new_lines))
    if hi < len(lines):
        return TextEdit(lo, 0, hi, 0, "")
    if lo > 0:
        return TextEdit(lo - 1, len(lines[lo - 1]), hi - 1, len(lines[hi - 1]), "")
    return TextEdit(0, 0, hi - 1, len(lines[hi - 1]), "")


def relocate(lines: list[str], start: int, end: int, insert_at: int, block: list[str]) -> list[str]:
    """Remove lines[start:end] and insert block at insert_at.

    insert_at is an index into ``lines``; it is shifted down by
    the removed length when the removal precedes it.
    """
    rest = lines[:start] + lines[end:]
    if insert_at >= end:
        insert_at -= end - start
    elif insert_at > start:
        insert_at = start
    return rest[:insert_at] + block + rest[insert_at:]
