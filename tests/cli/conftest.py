"""Shared fixtures for CLI tests."""

import json
import os
import sys

import pytest

# Make the fakes in tests/commands/ importable.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "commands"))

from fake_command_runner import FakeCommandRunner  # noqa: E402


@pytest.fixture
def fake_runner():
    return FakeCommandRunner()


@pytest.fixture
def meta_root(tmp_path):
    """A meta-repo root with a valid project.config.json."""
    config = {
        "codebase": {"remote": "git@host:org/repo.git", "defaultBranch": "main"},
        "worktrees": {"root": "worktrees"},
    }
    (tmp_path / "project.config.json").write_text(json.dumps(config))
    return tmp_path
