"""CommandRunner: runs external commands synchronously as argument lists."""

import subprocess
from typing import List, Optional

from metarepo.errors import CommandError


class CommandRunner:
    """Runs a command and returns its trimmed stdout.

    Commands are always argument lists, never shell strings, so branch
    names and remote URLs are passed to the tool verbatim.
    """

    def run(self, args: List[str], cwd: Optional[str] = None) -> str:
        """Run args and return stdout with surrounding whitespace removed.

        Raises:
            CommandError: If the command exits non-zero or cannot be started.
                The message is the command's stderr when there is any.
        """
        result = self._execute(args, cwd)
        if result.returncode != 0:
            message = (result.stderr or "").strip() or f"Command failed: {' '.join(args)}"
            raise CommandError(message, command=args)
        return (result.stdout or "").strip()

    def succeeds(self, args: List[str], cwd: Optional[str] = None) -> bool:
        """Return True if args exits zero. Failure to start counts as False."""
        try:
            self.run(args, cwd=cwd)
        except CommandError:
            return False
        return True

    def _execute(self, args, cwd):
        try:
            return subprocess.run(
                args,
                cwd=cwd,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise CommandError(str(e), command=args) from e
