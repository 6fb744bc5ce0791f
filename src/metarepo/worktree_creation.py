"""Worktree creation: one worktree per branch, next to the main worktree."""

import os

import click

from metarepo.branch_names import sanitize_branch_name
from metarepo.errors import BareRepositoryMissingError, CommandError, WorktreeExistsError
from metarepo.package_manager import install_dependencies


class WorktreeCreator:
    """Creates a worktree for a branch and installs its dependencies."""

    def __init__(self, context, bare_repo, package_manager):
        self._context = context
        self._bare_repo = bare_repo
        self._package_manager = package_manager

    def create(self, config, branch, frozen_lockfile=False):
        """Create the worktree for branch and return its path.

        The branch is resolved in order: existing local branch, then a
        local branch tracking origin/<branch>, then a brand-new branch.

        Raises:
            BareRepositoryMissingError: If bootstrap has not been run.
            WorktreeExistsError: If the target folder already exists.
            CommandError: If a git command other than fetch fails.
            InstallError: If dependency installation fails.
        """
        folder_name = sanitize_branch_name(branch)
        worktree_path = self._context.worktree_path(config, folder_name)

        click.echo(f"Branch name: {branch}")
        click.echo(f"Folder name: {folder_name}")
        click.echo(f"Worktree path: {worktree_path}\n")

        if not self._bare_repo.exists():
            raise BareRepositoryMissingError(
                f"{self._bare_repo.dir_name} repository not found.",
                hints=["Please run 'metarepo bootstrap' first to set up the repository."],
            )

        if os.path.exists(worktree_path):
            raise WorktreeExistsError(
                f"Worktree folder already exists at {worktree_path}",
                hints=[
                    "If you want to recreate it, first remove it with:",
                    f"  {self._bare_repo.remove_worktree_command(worktree_path)}",
                ],
            )

        self._fetch_latest()
        self._add_worktree(branch, worktree_path)
        click.echo("Worktree created successfully.\n")

        install_dependencies(self._package_manager, worktree_path, frozen_lockfile=frozen_lockfile)
        return worktree_path

    def _fetch_latest(self):
        click.echo("Fetching latest from remote...")
        try:
            self._bare_repo.fetch_all()
        except CommandError as e:
            click.echo(
                "Warning: Failed to fetch from remote. Continuing with local state.",
                err=True,
            )
            click.echo(e.message, err=True)
            return
        click.echo("Fetch complete.")

    def _add_worktree(self, branch, worktree_path):
        local_exists = self._bare_repo.local_branch_exists(branch)
        remote_exists = self._bare_repo.remote_branch_exists(branch)

        if local_exists:
            click.echo(f"Local branch '{branch}' exists.")
            click.echo(f"Creating worktree for existing branch '{branch}'...")
            self._bare_repo.add_worktree(worktree_path, branch)
        elif remote_exists:
            click.echo(f"Remote branch 'origin/{branch}' exists, creating local tracking branch.")
            self._bare_repo.create_tracking_branch(branch)
            click.echo(f"Creating worktree for existing branch '{branch}'...")
            self._bare_repo.add_worktree(worktree_path, branch)
        else:
            click.echo(f"Branch '{branch}' doesn't exist, creating new branch.")
            self._bare_repo.add_worktree_with_new_branch(worktree_path, branch)
