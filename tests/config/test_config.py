"""Tests for load_config."""

import json

import pytest

from metarepo.config import ProjectConfig, load_config
from metarepo.errors import ConfigError


def _write_config(tmp_path, data):
    path = tmp_path / "project.config.json"
    path.write_text(data if isinstance(data, str) else json.dumps(data))
    return str(path)


@pytest.mark.unit
class TestLoadConfig:

    def test_full_config(self, tmp_path):
        path = _write_config(tmp_path, {
            "codebase": {"remote": "git@host:org/repo.git", "defaultBranch": "develop"},
            "worktrees": {"root": "trees", "branchSanitizer": "slash-to-double-underscore"},
            "packageManager": {"command": "yarn"},
        })

        assert load_config(path) == ProjectConfig(
            remote="git@host:org/repo.git",
            default_branch="develop",
            worktrees_root="trees",
            branch_sanitizer="slash-to-double-underscore",
            package_manager="yarn",
        )

    def test_defaults_applied(self, tmp_path):
        path = _write_config(tmp_path, {"codebase": {"remote": "git@host:org/repo.git"}})

        config = load_config(path)

        assert config.default_branch == "main"
        assert config.worktrees_root == "worktrees"
        assert config.branch_sanitizer is None
        assert config.package_manager == "pnpm"

    def test_empty_optional_strings_fall_back_to_defaults(self, tmp_path):
        path = _write_config(tmp_path, {
            "codebase": {"remote": "git@host:org/repo.git", "defaultBranch": ""},
            "worktrees": {"root": ""},
        })

        config = load_config(path)

        assert config.default_branch == "main"
        assert config.worktrees_root == "worktrees"


@pytest.mark.unit
class TestLoadConfigErrors:

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="project.config.json not found") as exc_info:
            load_config(str(tmp_path / "project.config.json"))
        assert "codebase.remote" in exc_info.value.hints[0]

    def test_invalid_json(self, tmp_path):
        path = _write_config(tmp_path, "{not json")
        with pytest.raises(ConfigError, match="Failed to parse project.config.json"):
            load_config(path)

    def test_top_level_not_object(self, tmp_path):
        path = _write_config(tmp_path, [1, 2])
        with pytest.raises(ConfigError, match="malformed"):
            load_config(path)

    @pytest.mark.parametrize("codebase", [
        None,
        {},
        {"remote": ""},
        {"remote": "   "},
        {"remote": 42},
    ])
    def test_remote_required(self, tmp_path, codebase):
        data = {} if codebase is None else {"codebase": codebase}
        path = _write_config(tmp_path, data)

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert "codebase.remote must be a non-empty string" in exc_info.value.hints[0]

    def test_section_must_be_object(self, tmp_path):
        path = _write_config(tmp_path, {"codebase": {"remote": "r"}, "worktrees": "trees"})
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert "worktrees must be a JSON object" in exc_info.value.hints[0]

    def test_optional_field_must_be_string(self, tmp_path):
        path = _write_config(tmp_path, {"codebase": {"remote": "r", "defaultBranch": 7}})
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert "codebase.defaultBranch must be a string" in exc_info.value.hints[0]
