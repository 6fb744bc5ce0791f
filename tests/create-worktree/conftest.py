"""Shared fixtures for create-worktree tests."""

import os
import sys

import pytest

# Make the fakes in tests/commands/ importable.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "commands"))

from fake_bare_repository import FakeBareRepository  # noqa: E402
from fake_package_manager import FakePackageManager  # noqa: E402
from metarepo.config import ProjectConfig  # noqa: E402
from metarepo.context import MetaRepoContext  # noqa: E402


@pytest.fixture
def context(tmp_path):
    return MetaRepoContext.from_root(str(tmp_path))


@pytest.fixture
def config():
    return ProjectConfig(remote="git@host:org/repo.git", default_branch="main", worktrees_root="worktrees")


@pytest.fixture
def fake_bare(context):
    return FakeBareRepository(context.bare_path, exists=True)


@pytest.fixture
def fake_pm():
    return FakePackageManager()
