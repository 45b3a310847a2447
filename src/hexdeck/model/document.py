"""A planner file on disk with serialized mutations.

Card ids and offsets are only valid against the text they were computed
from, so two mutations on the same document must not interleave. Every
``PlannerFile`` for a given path shares one lock; ``mutate`` reads,
computes, and writes the edit while holding it.
"""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from collections.abc import Callable
from pathlib import Path

from hexdeck.model.edit import TextEdit
from hexdeck.models import BoardData
from hexdeck.parser import parse_board

logger = logging.getLogger(__name__)

_locks: dict[Path, threading.Lock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    with _locks_guard:
        return _locks.setdefault(path, threading.Lock())


class PlannerFile:
    """Read, parse and atomically rewrite one planner document."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).resolve()
        self._lock = _lock_for(self.path)

    def read(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def board(self) -> BoardData:
        """Parse the current contents."""
        return parse_board(self.read())

    def write(self, text: str) -> None:
        """Replace the file contents atomically."""
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(text)
            os.replace(tmp, self.path)
        except BaseException:
            os.unlink(tmp)
            raise
        logger.debug("wrote %s (%d bytes)", self.path, len(text))

    def apply(self, edit: TextEdit) -> str:
        """Apply an edit to the file and return the new text."""
        with self._lock:
            return self._apply(self.read(), edit)

    def _apply(self, text: str, edit: TextEdit) -> str:
        new_text = edit.apply(text)
        if new_text != text:
            self.write(new_text)
        return new_text

    def mutate(self, operation: Callable[..., TextEdit], *args, **kwargs) -> str:
        """Run ``operation(text, *args, **kwargs)`` and commit its edit.

        Reading, computing and writing happen under the per-file lock, so
        the next mutation always sees this one's result. Errors raised by
        the operation leave the file untouched.
        """
        with self._lock:
            text = self.read()
            edit = operation(text, *args, **kwargs)
            return self._apply(text, edit)
