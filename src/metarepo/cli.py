"""Click commands for the metarepo CLI."""

import os
import sys
from contextlib import contextmanager

import click

from metarepo.bare_repository import BareRepository
from metarepo.bootstrap import Bootstrapper
from metarepo.command_runner import CommandRunner
from metarepo.config import load_config
from metarepo.context import MetaRepoContext, find_meta_repo_root
from metarepo.errors import MetaRepoError
from metarepo.package_manager import PackageManager
from metarepo.worktree_creation import WorktreeCreator
from metarepo.worktree_inspection import WorktreeInspector


@contextmanager
def with_error_handling():
    """Report a MetaRepoError on stderr and exit with its exit code."""
    try:
        yield
    except MetaRepoError as e:
        click.echo(f"Error: {e.message}", err=True)
        for hint in e.hints:
            click.echo(hint, err=True)
        sys.exit(e.exit_code)


def _command_options(fn):
    """Apply the options shared by every metarepo command."""
    for option in reversed([
        click.option(
            "--root",
            envvar="METAREPO_ROOT",
            type=click.Path(file_okay=False),
            help="Meta-repo root. Defaults to the nearest directory holding project.config.json.",
        ),
        click.option(
            "--frozen-lockfile",
            is_flag=True,
            help="Install dependencies without updating the lockfile.",
        ),
    ]):
        fn = option(fn)
    return fn


def _resolve_context(root):
    return MetaRepoContext.from_root(root or find_meta_repo_root(os.getcwd()))


def _collaborators(context, config):
    runner = CommandRunner()
    bare_repo = BareRepository(context.bare_path, runner)
    package_manager = PackageManager(runner, config.package_manager)
    return bare_repo, package_manager


@click.command("bootstrap")
@_command_options
def bootstrap_cmd(root, frozen_lockfile):
    """Clone the bare repository and set up the main worktree."""
    click.echo("=== Bootstrap: Setting up monorepo ===\n")
    with with_error_handling():
        context = _resolve_context(root)
        config = load_config(context.config_path)
        bare_repo, package_manager = _collaborators(context, config)
        bootstrapper = Bootstrapper(context, bare_repo, package_manager, WorktreeInspector())
        worktree_path = bootstrapper.run(config, frozen_lockfile=frozen_lockfile)

    click.echo("\n=== Bootstrap complete! ===")
    click.echo(f"\nYou can now work in: {worktree_path}")


@click.command("create-worktree")
@click.argument("branch", required=False)
@_command_options
def create_worktree_cmd(branch, root, frozen_lockfile):
    """Create a worktree for BRANCH and install its dependencies."""
    if not branch:
        command_path = click.get_current_context().command_path
        click.echo(f"Usage: {command_path} <branch-name>", err=True)
        click.echo(f"Example: {command_path} feature/my-feature", err=True)
        sys.exit(1)

    with with_error_handling():
        context = _resolve_context(root)
        config = load_config(context.config_path)
        click.echo(f"=== Creating worktree for branch '{branch}' ===\n")
        bare_repo, package_manager = _collaborators(context, config)
        creator = WorktreeCreator(context, bare_repo, package_manager)
        worktree_path = creator.create(config, branch, frozen_lockfile=frozen_lockfile)

    click.echo("\n=== Worktree ready! ===")
    click.echo(f"\nYou can now work in: {worktree_path}")
    click.echo(f"  cd {worktree_path}")


@click.group()
def main():
    """metarepo - bare repository and worktree tooling for the meta-repo layout."""


main.add_command(bootstrap_cmd)
main.add_command(create_worktree_cmd)
