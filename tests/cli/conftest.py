"""Shared fixtures for CLI tests."""

import pytest


@pytest.fixture
def outside_repo(tmp_path, monkeypatch):
    """Run from a directory with no git config, so defaults apply."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
