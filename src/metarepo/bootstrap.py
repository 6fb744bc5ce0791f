"""Bootstrap: one-time setup of the bare repository and main worktree."""

import os

import click

from metarepo.errors import CommandError, WorktreeConflictError
from metarepo.package_manager import install_dependencies

_REMOVE_AND_RERUN = "Please remove or rename this directory and run bootstrap again."


class Bootstrapper:
    """Clones the bare repository and prepares the main worktree.

    Every step is idempotent, so bootstrap can be rerun after fixing
    whatever stopped a previous run.
    """

    def __init__(self, context, bare_repo, package_manager, inspector):
        self._context = context
        self._bare_repo = bare_repo
        self._package_manager = package_manager
        self._inspector = inspector

    def run(self, config, frozen_lockfile=False):
        """Run bootstrap and return the main worktree path."""
        click.echo(f"Meta-repo root: {self._context.root}")
        click.echo(f"Codebase remote: {config.remote}")
        click.echo(f"Default branch: {config.default_branch}\n")

        self._ensure_bare_repository(config.remote)
        worktree_path = self._ensure_main_worktree(config)
        self._enable_pinning()
        install_dependencies(self._package_manager, worktree_path, frozen_lockfile=frozen_lockfile)
        return worktree_path

    def _ensure_bare_repository(self, remote):
        if self._bare_repo.exists():
            click.echo("Bare repository already exists.")
        else:
            click.echo(f"Cloning bare repository from {remote}...")
            self._bare_repo.clone(remote)
            click.echo("Bare repository cloned successfully.")
        self._ensure_remote_tracking()

    def _ensure_remote_tracking(self):
        if self._bare_repo.has_remote_tracking_refspec():
            return
        try:
            self._bare_repo.configure_remote_tracking_refspec()
        except CommandError as e:
            click.echo("Warning: Failed to configure remote-tracking branches.", err=True)
            click.echo(e.message, err=True)

    def _ensure_main_worktree(self, config):
        worktree_path = self._context.main_worktree_path(config)

        if os.path.exists(worktree_path):
            self._validate_existing_worktree(worktree_path)
            click.echo("Main worktree already exists and is valid.")
            return worktree_path

        branch = config.default_branch
        click.echo(f"Creating main worktree for branch '{branch}'...")
        self._bare_repo.add_worktree(worktree_path, branch)
        click.echo("Main worktree created successfully.")
        return worktree_path

    def _validate_existing_worktree(self, worktree_path):
        if not self._inspector.is_inside_work_tree(worktree_path):
            raise WorktreeConflictError(
                f"{worktree_path} exists but is not a valid git worktree.",
                hints=[_REMOVE_AND_RERUN],
            )
        if not self._inspector.points_to_bare_repository(worktree_path, self._bare_repo.dir_name):
            raise WorktreeConflictError(
                f"{worktree_path} exists but is not a worktree for our "
                f"{self._bare_repo.dir_name} repository.",
                hints=[_REMOVE_AND_RERUN],
            )

    def _enable_pinning(self):
        click.echo("Enabling corepack...")
        try:
            self._package_manager.enable_pinning()
        except CommandError as e:
            click.echo(
                "Warning: Failed to enable corepack. "
                "You may need to run 'corepack enable' manually.",
                err=True,
            )
            click.echo(e.message, err=True)
            return
        click.echo("Corepack enabled.")
