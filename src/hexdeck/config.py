"""Settings from the ``[hexdeck]`` section of git config."""

import logging
from pathlib import Path
from typing import Any

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

logger = logging.getLogger(__name__)

SECTION = "hexdeck"

HEXDECK_DEFAULTS = {
    "file": "planner.md",
    "add-section": "now",
    "weekdays": 5,
    "log-level": "warning",
}


def _python_key(git_key: str) -> str:
    """Convert git-style key (hyphenated) to Python-style (underscored)."""
    return git_key.replace("-", "_")


def _coerce_value(git_key: str, raw: str):
    """Type-coerce a value using the type of its default."""
    default = HEXDECK_DEFAULTS.get(git_key)
    if isinstance(default, bool):
        return raw.lower() in ("true", "yes", "1")
    if isinstance(default, int):
        try:
            return int(raw)
        except ValueError:
            logger.warning("ignoring %s.%s = %r: not a number", SECTION, git_key, raw)
            return default
    return raw


def defaults() -> dict[str, Any]:
    return {_python_key(k): v for k, v in HEXDECK_DEFAULTS.items()}


def find_repo(path: str | Path) -> Repo | None:
    """The git repository containing path, or None."""
    try:
        return Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return None


def read_config(path: str | Path = ".") -> dict[str, Any]:
    """Read hexdeck settings for the repository containing path.

    Keys are Python-style (underscored). Missing keys, or a path outside
    any repository, fall back to the defaults.
    """
    config = defaults()
    repo = find_repo(path)
    if repo is None:
        return config
    reader = repo.config_reader()
    if not reader.has_section(SECTION):
        return config
    for git_k, raw in reader.items(SECTION):
        config[_python_key(git_k)] = _coerce_value(git_k, raw)
    return config
