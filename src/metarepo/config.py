"""ProjectConfig: loads and validates project.config.json."""

import json
import os
from dataclasses import dataclass
from typing import Optional

from metarepo.errors import ConfigError

CONFIG_FILE_NAME = "project.config.json"

DEFAULT_BRANCH = "main"
DEFAULT_WORKTREES_ROOT = "worktrees"
DEFAULT_PACKAGE_MANAGER = "pnpm"


@dataclass(frozen=True)
class ProjectConfig:
    """Validated contents of project.config.json, with defaults applied."""

    remote: str
    default_branch: str = DEFAULT_BRANCH
    worktrees_root: str = DEFAULT_WORKTREES_ROOT
    branch_sanitizer: Optional[str] = None
    package_manager: str = DEFAULT_PACKAGE_MANAGER


def load_config(config_path: str) -> ProjectConfig:
    """Read config_path and return a validated ProjectConfig.

    Raises:
        ConfigError: If the file is missing, is not a JSON object, or
            codebase.remote is missing or blank.
    """
    if not os.path.isfile(config_path):
        raise ConfigError(
            f"{CONFIG_FILE_NAME} not found at {config_path}",
            hints=[
                f"Please create {CONFIG_FILE_NAME} with codebase.remote "
                "and codebase.defaultBranch",
            ],
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(
            f"Failed to parse {CONFIG_FILE_NAME}", hints=[str(e)]
        ) from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"{CONFIG_FILE_NAME} is malformed",
            hints=["  - top-level value must be a JSON object"],
        )

    codebase = _section(data, "codebase")
    worktrees = _section(data, "worktrees")
    package_manager = _section(data, "packageManager")

    remote = codebase.get("remote")
    if not isinstance(remote, str) or not remote.strip():
        raise ConfigError(
            f"{CONFIG_FILE_NAME} is malformed",
            hints=["  - codebase.remote must be a non-empty string (git remote URL)"],
        )

    return ProjectConfig(
        remote=remote,
        default_branch=_optional_string(codebase, "codebase", "defaultBranch") or DEFAULT_BRANCH,
        worktrees_root=_optional_string(worktrees, "worktrees", "root") or DEFAULT_WORKTREES_ROOT,
        branch_sanitizer=_optional_string(worktrees, "worktrees", "branchSanitizer"),
        package_manager=_optional_string(package_manager, "packageManager", "command")
        or DEFAULT_PACKAGE_MANAGER,
    )


def _section(data, name):
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(
            f"{CONFIG_FILE_NAME} is malformed",
            hints=[f"  - {name} must be a JSON object"],
        )
    return section


def _optional_string(section, section_name, key):
    """Return section[key] if it is a string, None if absent or null."""
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(
            f"{CONFIG_FILE_NAME} is malformed",
            hints=[f"  - {section_name}.{key} must be a string"],
        )
    return value
