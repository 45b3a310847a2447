"""Tests for git config settings."""

import pytest
from git import Repo

from hexdeck.config import defaults, read_config


@pytest.fixture
def temp_repo(tmp_path):
    """An empty git repository."""
    Repo.init(tmp_path)
    return tmp_path


def _set(path, key, value):
    writer = Repo(path).config_writer("repository")
    writer.set_value("hexdeck", key, value)
    writer.release()


def test_defaults_outside_repo(tmp_path):
    assert read_config(tmp_path) == defaults()


def test_defaults_missing_path(tmp_path):
    assert read_config(tmp_path / "nope") == defaults()


def test_defaults_without_section(temp_repo):
    config = read_config(temp_repo)
    assert config["file"] == "planner.md"
    assert config["add_section"] == "now"
    assert config["weekdays"] == 5
    assert config["log_level"] == "warning"


def test_values_are_read(temp_repo):
    _set(temp_repo, "file", "notes/week.md")
    _set(temp_repo, "add-section", "parking-lot")
    config = read_config(temp_repo)
    assert config["file"] == "notes/week.md"
    assert config["add_section"] == "parking-lot"
    assert "add-section" not in config


def test_int_coercion(temp_repo):
    _set(temp_repo, "weekdays", "7")
    config = read_config(temp_repo)
    assert config["weekdays"] == 7
    assert isinstance(config["weekdays"], int)


def test_bad_int_falls_back(temp_repo):
    _set(temp_repo, "weekdays", "many")
    assert read_config(temp_repo)["weekdays"] == 5


def test_found_from_subdirectory(temp_repo):
    _set(temp_repo, "weekdays", "6")
    sub = temp_repo / "docs"
    sub.mkdir()
    assert read_config(sub)["weekdays"] == 6
