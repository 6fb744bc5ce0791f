"""Error types for metarepo commands.

Procedures raise these instead of exiting; the CLI maps them to exit codes
in one place (see metarepo.cli.with_error_handling).
"""

from typing import List, Optional


class MetaRepoError(Exception):
    """Base class for fatal metarepo errors.

    Args:
        message: One-line description printed after "Error: ".
        hints: Extra lines printed below the message, e.g. a command to run.
    """

    exit_code = 1

    def __init__(self, message: str, hints: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.hints = hints or []


class ConfigError(MetaRepoError):
    """project.config.json is missing, unparseable, or invalid."""


class CommandError(MetaRepoError):
    """An external command exited non-zero or could not be started."""

    def __init__(self, message: str, command: Optional[List[str]] = None):
        super().__init__(message)
        self.command = list(command or [])


class BareRepositoryMissingError(MetaRepoError):
    pass


class WorktreeExistsError(MetaRepoError):
    pass


class WorktreeConflictError(MetaRepoError):
    """A directory sits where the main worktree should be but is not ours."""


class InstallError(MetaRepoError):
    pass
