"""Checks on an existing worktree directory."""

import os

from git import Git
from git.exc import GitCommandError, GitCommandNotFound

LINKAGE_PREFIX = "gitdir:"


class WorktreeInspector:
    """Answers whether a directory is a worktree of our bare repository."""

    def is_inside_work_tree(self, path: str) -> bool:
        """Return True if git considers path to be inside a work tree."""
        try:
            return Git(path).rev_parse("--is-inside-work-tree").strip() == "true"
        except (GitCommandError, GitCommandNotFound):
            return False

    def points_to_bare_repository(self, path: str, bare_dir_name: str) -> bool:
        """Return True if path/.git is a linkage file referencing bare_dir_name.

        A linked worktree's .git is a file like:
            gitdir: /meta/.bare/worktrees/main
        """
        gitdir = read_linkage(path)
        return gitdir is not None and bare_dir_name in gitdir


def read_linkage(worktree_path):
    """Return the gitdir path from worktree_path/.git, or None if it is not a linkage file."""
    git_file = os.path.join(worktree_path, ".git")
    if not os.path.isfile(git_file):
        return None
    try:
        with open(git_file, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except (OSError, UnicodeDecodeError):
        return None
    if not content.startswith(LINKAGE_PREFIX):
        return None
    return content[len(LINKAGE_PREFIX):].strip()
