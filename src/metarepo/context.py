"""MetaRepoContext: resolved paths for one invocation."""

import os
from dataclasses import dataclass

from metarepo.config import CONFIG_FILE_NAME, ProjectConfig

BARE_DIR_NAME = ".bare"
MAIN_WORKTREE_NAME = "main"


@dataclass(frozen=True)
class MetaRepoContext:
    """Absolute paths derived from the meta-repo root.

    Built once by the CLI and passed to every procedure.
    """

    root: str

    @classmethod
    def from_root(cls, root: str) -> "MetaRepoContext":
        return cls(root=os.path.abspath(root))

    @property
    def config_path(self) -> str:
        return os.path.join(self.root, CONFIG_FILE_NAME)

    @property
    def bare_path(self) -> str:
        return os.path.join(self.root, BARE_DIR_NAME)

    def worktrees_root(self, config: ProjectConfig) -> str:
        return os.path.join(self.root, config.worktrees_root)

    def worktree_path(self, config: ProjectConfig, folder_name: str) -> str:
        return os.path.join(self.worktrees_root(config), folder_name)

    def main_worktree_path(self, config: ProjectConfig) -> str:
        return self.worktree_path(config, MAIN_WORKTREE_NAME)


def find_meta_repo_root(start_dir: str) -> str:
    """Return the nearest directory at or above start_dir holding project.config.json.

    Falls back to start_dir when no ancestor has one, so the config loader
    reports the missing file against the directory the user is in.
    """
    current = os.path.abspath(start_dir)
    while True:
        if os.path.isfile(os.path.join(current, CONFIG_FILE_NAME)):
            return current
        parent = os.path.dirname(current)
        if parent == current:
            return os.path.abspath(start_dir)
        current = parent
