"""Shared fixtures for command-layer tests."""

import os
import sys

import pytest

# Make the fakes in this directory importable from every test directory.
sys.path.insert(0, os.path.dirname(__file__))

from fake_command_runner import FakeCommandRunner  # noqa: E402


@pytest.fixture
def fake_runner():
    return FakeCommandRunner()
