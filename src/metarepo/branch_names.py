"""Branch name to directory name mapping."""

import re

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def sanitize_branch_name(branch: str) -> str:
    """Sanitize a branch name for use as a worktree folder name.

    Each "/" becomes "__" (so feature/x -> feature__x), then any character
    outside [A-Za-z0-9._-] becomes "_". Distinct branches may map to the
    same folder name; callers rely on the path-exists check.
    """
    return _UNSAFE_CHARS.sub("_", branch.replace("/", "__"))
