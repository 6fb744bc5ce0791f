"""PackageManager: dependency installation inside a worktree."""

import click

from metarepo.command_runner import CommandRunner
from metarepo.config import DEFAULT_PACKAGE_MANAGER
from metarepo.errors import CommandError, InstallError

PINNING_ENABLE_COMMAND = ["corepack", "enable"]


class PackageManager:
    """Runs the configured package manager (pnpm by default).

    Args:
        runner: CommandRunner used for every invocation.
        command: Package manager executable, from packageManager.command.
    """

    def __init__(self, runner: CommandRunner, command: str = DEFAULT_PACKAGE_MANAGER):
        self._runner = runner
        self._command = command

    @property
    def command(self) -> str:
        return self._command

    def enable_pinning(self) -> None:
        """Enable corepack so the pinned package manager version is used."""
        self._runner.run(list(PINNING_ENABLE_COMMAND))

    def install(self, cwd: str, frozen_lockfile: bool = False) -> None:
        args = [self._command, "install"]
        if frozen_lockfile:
            args.append("--frozen-lockfile")
        self._runner.run(args, cwd=cwd)


def install_dependencies(package_manager, worktree_path, frozen_lockfile=False):
    """Install dependencies in worktree_path.

    Raises:
        InstallError: If the package manager fails. Unlike enabling
            pinning, a failed install leaves the worktree unusable.
    """
    click.echo("Installing dependencies...")
    try:
        package_manager.install(worktree_path, frozen_lockfile=frozen_lockfile)
    except CommandError as e:
        raise InstallError("Failed to install dependencies.", hints=[e.message]) from e
    click.echo("Dependencies installed successfully.")
