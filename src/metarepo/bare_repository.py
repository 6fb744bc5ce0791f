"""BareRepository: git operations against the shared .bare repository.

Each method maps to a single git command run with --git-dir pointing at
the bare repository, so callers can reason about side effects.
"""

import os

from metarepo.command_runner import CommandRunner

REMOTE_NAME = "origin"
REMOTE_TRACKING_REFSPEC = f"+refs/heads/*:refs/remotes/{REMOTE_NAME}/*"


class BareRepository:
    """Wraps the bare codebase repository at bare_path.

    Args:
        bare_path: Absolute path of the bare repository (<root>/.bare).
        runner: CommandRunner used for every git invocation.
    """

    def __init__(self, bare_path: str, runner: CommandRunner):
        self._bare_path = bare_path
        self._runner = runner

    @property
    def path(self) -> str:
        return self._bare_path

    @property
    def dir_name(self) -> str:
        return os.path.basename(os.path.normpath(self._bare_path))

    def exists(self) -> bool:
        return os.path.exists(self._bare_path)

    def clone(self, remote: str) -> None:
        self._runner.run(["git", "clone", "--bare", remote, self._bare_path])

    def has_remote_tracking_refspec(self) -> bool:
        return self._runner.succeeds(
            self._git_args("config", "--get", f"remote.{REMOTE_NAME}.fetch")
        )

    def configure_remote_tracking_refspec(self) -> None:
        """Make fetches populate refs/remotes/origin/*.

        A bare clone has no fetch refspec, so without this a fetch never
        creates remote-tracking refs.
        """
        self._git("config", f"remote.{REMOTE_NAME}.fetch", REMOTE_TRACKING_REFSPEC)

    def fetch_all(self) -> None:
        self._git("fetch", "--all", "--prune")

    def local_branch_exists(self, branch: str) -> bool:
        return self._ref_exists(f"refs/heads/{branch}")

    def remote_branch_exists(self, branch: str) -> bool:
        return self._ref_exists(f"refs/remotes/{REMOTE_NAME}/{branch}")

    def create_tracking_branch(self, branch: str) -> None:
        self._git("branch", "--track", branch, f"{REMOTE_NAME}/{branch}")

    def add_worktree(self, worktree_path: str, branch: str) -> None:
        """Check out an existing branch at worktree_path."""
        self._git("worktree", "add", worktree_path, branch)

    def add_worktree_with_new_branch(self, worktree_path: str, branch: str) -> None:
        """Create branch from HEAD and check it out at worktree_path."""
        self._git("worktree", "add", "-b", branch, worktree_path)

    def remove_worktree_command(self, worktree_path: str) -> str:
        """Return the command an operator can run to remove a worktree."""
        return f'git --git-dir "{self._bare_path}" worktree remove --force "{worktree_path}"'

    def _ref_exists(self, ref):
        return self._runner.succeeds(self._git_args("show-ref", "--verify", "--quiet", ref))

    def _git(self, *args):
        return self._runner.run(self._git_args(*args))

    def _git_args(self, *args):
        return ["git", "--git-dir", self._bare_path, *args]
